"""
Catalog query tests: listings, lookups, and summary/detail projections.
"""
import pytest
from decimal import Decimal

from common.response import ErrorKind, Ok
from modules.catalog.schemas import ProductView, ProductSummary, ProductDetail, to_detail, to_summary
from modules.catalog.service import catalog_service, EMPTY_LIST_MESSAGE

SUMMARY_FIELDS = {"productCode", "name", "description", "categoryCode"}
DETAIL_FIELDS = SUMMARY_FIELDS | {"price", "stock", "color", "size"}


class TestListProducts:

    def test_empty_catalog_is_success(self, db):
        result = catalog_service.list_products(db)

        assert isinstance(result, Ok)
        assert result.status_code == 200
        assert result.message == EMPTY_LIST_MESSAGE
        assert result.data == []

    def test_lists_summary_view_in_id_order(self, db, make_product):
        make_product(code="B2")
        make_product(code="A1")

        result = catalog_service.list_products(db)

        assert result.message == "List of products"
        assert [p.productCode for p in result.data] == ["B2", "A1"]
        assert all(set(p.model_dump()) == SUMMARY_FIELDS for p in result.data)


class TestSearchByCode:

    def test_summary_view_exposes_only_summary_fields(self, db, make_product):
        make_product(code="A1", category_code="SHIRT", name="Tee", description="Cotton tee")

        result = catalog_service.search_by_code(db, "A1", ProductView.SUMMARY)

        assert result.message == "Product found success"
        assert result.data.model_dump() == {
            "productCode": "A1",
            "name": "Tee",
            "description": "Cotton tee",
            "categoryCode": "SHIRT",
        }

    def test_detail_view_adds_commerce_and_variant_fields(self, db, make_product):
        make_product(code="A1", stock=7, price=Decimal("12.30"), color="Blue", size="XL")

        result = catalog_service.search_by_code(db, "A1", ProductView.DETAIL)

        data = result.data.model_dump()
        assert set(data) == DETAIL_FIELDS
        assert data["stock"] == 7
        assert data["price"] == pytest.approx(12.30)
        assert (data["color"], data["size"]) == ("Blue", "XL")

    def test_unknown_code_is_not_found(self, db, make_product):
        make_product(code="A1")

        result = catalog_service.search_by_code(db, "B9", ProductView.DETAIL)

        assert result.kind == ErrorKind.NOT_FOUND
        assert result.message == "Not found product with code: B9"

    @pytest.mark.parametrize("code", [None, ""])
    def test_missing_code_is_bad_request(self, db, code):
        result = catalog_service.search_by_code(db, code)

        assert result.kind == ErrorKind.BAD_REQUEST
        assert result.message == "productCode is required"


class TestSearchByCategory:

    def test_filters_by_category_code(self, db, make_product):
        make_product(code="S1", category_code="SHIRT")
        make_product(code="P1", category_code="PANTS")
        make_product(code="S2", category_code="SHIRT")

        result = catalog_service.search_by_category(db, "SHIRT")

        assert result.message == "List of products by Category"
        assert [p.productCode for p in result.data] == ["S1", "S2"]
        assert all(isinstance(p, ProductSummary) for p in result.data)

    def test_unknown_category_is_empty_success(self, db, make_product):
        make_product(code="S1", category_code="SHIRT")

        result = catalog_service.search_by_category(db, "HATS")

        assert isinstance(result, Ok)
        assert result.message == EMPTY_LIST_MESSAGE
        assert result.data == []

    def test_missing_category_is_bad_request(self, db):
        result = catalog_service.search_by_category(db, None)

        assert result.kind == ErrorKind.BAD_REQUEST
        assert result.message == "categoryCode is required"


def test_projections_share_one_entity(db, make_product):
    product = make_product(code="A1", stock=3)

    summary = to_summary(product)
    detail = to_detail(product)

    assert isinstance(detail, ProductDetail)
    assert detail.model_dump(include=SUMMARY_FIELDS) == summary.model_dump()
    assert not hasattr(summary, "stock")
