import uuid

import pytest

from hexstore.dto import ProductDTO
from hexstore.product import ProductError, ProductStatus, new_product


def test_from_dict_reads_fields():
    product_id = str(uuid.uuid4())
    dto = ProductDTO.from_dict(
        {"id": product_id, "name": "teste", "price": 10, "status": "ENABLED"}
    )
    assert dto == ProductDTO(id=product_id, name="teste", price=10.0, status="ENABLED")


def test_from_dict_defaults_and_ignores_unknown_keys():
    dto = ProductDTO.from_dict({"name": "teste", "colour": "red"})
    assert dto == ProductDTO(name="teste")


@pytest.mark.parametrize(
    "data",
    [{"price": "ten"}, {"price": True}, {"name": 5}, ["not", "an", "object"]],
)
def test_from_dict_rejects_bad_types(data):
    with pytest.raises(ValueError):
        ProductDTO.from_dict(data)


def test_bind_copies_fields():
    product = new_product("old", 1)
    original_id = product.id
    dto = ProductDTO(name="teste", price=10, status="ENABLED")
    result = dto.bind(product)
    assert result is product
    assert result.id == original_id
    assert result.name == "teste"
    assert result.price == 10
    assert result.status == ProductStatus.ENABLED.value


def test_bind_overrides_id_when_given():
    product = new_product("old", 1)
    new_id = str(uuid.uuid4())
    ProductDTO(id=new_id, name="teste", price=1).bind(product)
    assert product.id == new_id
    assert product.status == ProductStatus.DISABLED.value


def test_bind_invalid_status_raises():
    dto = ProductDTO(name="teste", price=10, status="invalido")
    with pytest.raises(ProductError) as excinfo:
        dto.bind(new_product("old", 1))
    assert str(excinfo.value) == "o status deve ser ativo o desativo"


def test_bind_invalid_id_raises():
    dto = ProductDTO(id="123", name="teste", price=10, status="ENABLED")
    with pytest.raises(ProductError):
        dto.bind(new_product("old", 1))