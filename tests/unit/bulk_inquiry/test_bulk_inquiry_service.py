"""Tests for BulkInquiryService."""

import asyncio

import pytest

from snackstore.core.modules.bulk_inquiry.models import MIN_BULK_QUANTITY, CustomerInfo
from snackstore.core.modules.bulk_inquiry.service import BulkInquiryService
from snackstore.errors import ValidationError


@pytest.fixture
def service(mock_database):
    return BulkInquiryService(mock_database)


@pytest.fixture
def customer():
    return CustomerInfo(name=" <b>Ravi</b> ", email=" Ravi@Example.com", phone="+91 98765 43210", company="Ravi Caterers")


class TestSubmitInquiry:
    def test_inquiry_stored_sanitized(self, service, mock_collection, customer):
        inquiry = asyncio.run(
            service.submit_inquiry("p1", "Aloo Bhujia", MIN_BULK_QUANTITY, customer, 120.0, 0.15, 102.0)
        )

        assert inquiry.customer_info.name == "Ravi"
        assert inquiry.customer_info.email == "ravi@example.com"
        assert inquiry.customer_info.phone == "+919876543210"
        assert mock_collection.insert_one.await_args.args[0]["quantity"] == MIN_BULK_QUANTITY

    def test_quantity_below_minimum(self, service, mock_collection, customer):
        with pytest.raises(ValidationError, match="Minimum quantity is 50 units"):
            asyncio.run(service.submit_inquiry("p1", "Aloo Bhujia", MIN_BULK_QUANTITY - 1, customer))
        mock_collection.insert_one.assert_not_awaited()

    def test_phone_required(self, service):
        with pytest.raises(ValidationError, match="Name and phone number are required"):
            asyncio.run(service.submit_inquiry("p1", "Aloo Bhujia", 100, CustomerInfo(name="Ravi", email="r@x.io")))

    def test_invalid_email(self, service):
        customer = CustomerInfo(name="Ravi", email="not-an-email", phone="9876543210")
        with pytest.raises(ValidationError, match="Invalid email address"):
            asyncio.run(service.submit_inquiry("p1", "Aloo Bhujia", 100, customer))
