"""
Unit tests for Response decoding and status mapping.
"""

import xml.etree.ElementTree as ElementTree

import pytest

from helpers.mocks import make_result

from xero_client.remote.request import Request
from xero_client.remote.response import Response, xml_to_value
from xero_client.runtime.errors import (
    BadRequestError, ForbiddenError, InternalServerError, NotAvailableError,
    NotFoundError, NotImplementedError_, RateLimitExceededError, ResponseError,
    ResponseParseError, UnauthorizedError,
)


def parsed(app, body, status=200, content_type="text/xml", headers=None):
    request = Request(app, "https://api.xero.com/api.xro/2.0/Contacts")
    result = make_result(body, status, content_type, headers)
    response = Response(request, result.body, result)
    response.parse()
    return response


class TestXmlDecoding:
    """Tests for XML bodies."""

    def test_collection_elements(self, app, contacts_xml):
        """Test each collection child becomes one record."""
        response = parsed(app, contacts_xml)
        elements = response.get_elements()

        assert len(elements) == 2
        assert elements[0]["Name"] == "ABC Limited"
        assert elements[1]["ContactID"] == "6d42f03b-181f-43e3-93fb-2025c012de92"

    def test_repeated_children_become_lists(self, app, contacts_xml):
        """Test plural containers decode to lists of records."""
        first, second = parsed(app, contacts_xml).get_elements()

        assert first["Addresses"] == [
            {"AddressType": "POBOX", "City": "Wellington"},
            {"AddressType": "STREET", "City": "Auckland"},
        ]
        assert second["Phones"] == [{"PhoneType": "DEFAULT", "PhoneNumber": "1234567"}]

    def test_charset_in_content_type(self, app, contacts_xml):
        """Test content type parameters are ignored."""
        response = parsed(app, contacts_xml, content_type="text/xml; charset=utf-8")
        assert response.get_content_type() == "text/xml"
        assert len(response.get_elements()) == 2

    def test_malformed_xml(self, app):
        """Test broken XML raises a parse error."""
        with pytest.raises(ResponseParseError):
            parsed(app, "<Response><Contacts>")

    def test_validation_errors(self, app, validation_error_xml):
        """Test ApiException bodies expose the root error and messages."""
        response = parsed(app, validation_error_xml, status=400)

        assert response.get_root_error()["Type"] == "ValidationException"
        assert response.get_error_message() == "A validation exception occurred"
        assert response.get_element_errors() == ["Email address must be valid."]

        with pytest.raises(BadRequestError) as exc_info:
            response.raise_for_status()
        assert exc_info.value.status == 400
        assert exc_info.value.validation_errors == ["Email address must be valid."]

    def test_xml_to_value_nested_dict(self):
        """Test mixed children decode to a dict."""
        element = ElementTree.fromstring("<Invoice><Contact><Name>A</Name></Contact><Total>10</Total></Invoice>")
        assert xml_to_value(element) == {"Contact": {"Name": "A"}, "Total": "10"}

    def test_xml_to_value_plural_ies(self):
        """Test -ies plurals are recognised."""
        element = ElementTree.fromstring(
            "<TrackingCategories><TrackingCategory><Name>Region</Name></TrackingCategory></TrackingCategories>"
        )
        assert xml_to_value(element) == [{"Name": "Region"}]


class TestJsonDecoding:
    """Tests for JSON bodies."""

    def test_collection_elements(self, app):
        """Test list-valued keys provide the records."""
        body = {"Id": "abc", "Status": "OK", "Invoices": [{"InvoiceID": "1"}, {"InvoiceID": "2"}]}
        response = parsed(app, body)
        assert [e["InvoiceID"] for e in response.get_elements()] == ["1", "2"]

    def test_top_level_list(self, app):
        """Test a bare JSON array is a list of records."""
        response = parsed(app, [{"Name": "A"}, {"Name": "B"}])
        assert len(response.get_elements()) == 2

    def test_malformed_json(self, app):
        """Test broken JSON raises a parse error."""
        with pytest.raises(ResponseParseError):
            parsed(app, "{not json", content_type="application/json")

    def test_json_validation_error(self, app):
        """Test JSON error bodies expose the same details as XML ones."""
        body = {
            "ErrorNumber": 10,
            "Type": "ValidationException",
            "Message": "A validation exception occurred",
            "Elements": [{"ValidationErrors": [{"Message": "Invoice not of valid status"}]}],
        }
        response = parsed(app, body, status=400)
        assert response.get_element_errors() == ["Invoice not of valid status"]
        assert response.get_error_message() == "A validation exception occurred"


class TestOtherBodies:
    """Tests for non-XML/JSON bodies."""

    def test_pdf_kept_raw(self, app):
        """Test binary bodies are not decoded."""
        response = parsed(app, b"%PDF-1.4 ...", content_type="application/pdf")
        assert response.get_elements() == []
        assert response.get_body() == b"%PDF-1.4 ..."

    def test_oauth_problem(self, app):
        """Test form-encoded OAuth problems are decoded."""
        body = "oauth_problem=token_expired&oauth_problem_advice=The%20access%20token%20has%20expired"
        response = parsed(app, body, status=401, content_type="text/html")

        assert response.get_error_message() == "token_expired: The access token has expired"
        with pytest.raises(UnauthorizedError, match="token_expired"):
            response.raise_for_status()

    def test_rate_limit_problem(self, app):
        """Test an OAuth rate limit problem maps to RateLimitExceededError."""
        body = "oauth_problem=rate%20limit%20exceeded"
        response = parsed(app, body, status=503, content_type="text/html")
        with pytest.raises(RateLimitExceededError):
            response.raise_for_status()

    def test_rate_limit_header(self, app):
        """Test the rate limit problem header is honoured."""
        response = parsed(app, b"", status=429, headers={"X-Rate-Limit-Problem": "minute"})
        assert response.is_rate_limited()
        with pytest.raises(RateLimitExceededError):
            response.raise_for_status()


class TestStatusMapping:
    """Tests for raise_for_status()."""

    @pytest.mark.parametrize("status", [200, 201, 204, 304])
    def test_success_statuses(self, app, status):
        """Test success and not-modified do not raise."""
        parsed(app, b"", status=status).raise_for_status()

    @pytest.mark.parametrize("status,error_cls", [
        (400, BadRequestError),
        (401, UnauthorizedError),
        (403, ForbiddenError),
        (404, NotFoundError),
        (500, InternalServerError),
        (501, NotImplementedError_),
        (502, InternalServerError),
        (503, NotAvailableError),
        (418, ResponseError),
    ])
    def test_error_statuses(self, app, status, error_cls):
        """Test each error status maps onto its error type."""
        response = parsed(app, b"", status=status)
        assert not response.is_success()
        with pytest.raises(error_cls) as exc_info:
            response.raise_for_status()
        assert exc_info.value.status == status

    def test_metadata_accessors(self, app):
        """Test transport metadata is exposed."""
        response = parsed(app, b"", status=200, headers={"X-Correlation-Id": "abc"})
        assert response.get_status() == 200
        assert response.get_headers()["X-Correlation-Id"] == "abc"
        assert response.get_elapsed() == 0.01


class TestIrregularBodies:
    """Tests for well-formed bodies with unusual shapes."""

    def test_empty_element_in_error_body(self, app):
        """Test childless entries under Elements are skipped."""
        body = (
            "<ApiException><ErrorNumber>10</ErrorNumber>"
            "<Type>ValidationException</Type>"
            "<Elements><DataContractBase/></Elements></ApiException>"
        )
        response = parsed(app, body, status=400)

        assert response.get_elements() == []
        assert response.get_root_error()["ErrorNumber"] == "10"
        with pytest.raises(BadRequestError):
            response.raise_for_status()

    def test_json_records_from_first_list_only(self, app):
        """Test later list-valued keys are not read as records."""
        body = {
            "Status": "OK",
            "Contacts": [{"ContactID": "a"}],
            "Warnings": [{"Message": "deprecated"}],
        }
        assert parsed(app, body).get_elements() == [{"ContactID": "a"}]

    def test_send_survives_empty_error_element(self, app, mock_transport):
        """Test a request still stores the response for such a body."""
        mock_transport.queue("<ApiException><Elements><DataContractBase/></Elements></ApiException>", status=400)
        request = Request(app, "https://api.xero.com/api.xro/2.0/Contacts")

        response = request.send()

        assert response.get_status() == 400
        assert response.get_request() is request
        assert response.get_info().status == 400

    def test_oauth_problem_mapping(self, app):
        body = "oauth_problem=token_rejected&oauth_problem_advice=Token%20unknown"
        response = parsed(app, body, status=401, content_type="text/html")
        assert response.get_oauth_problem() == {
            "oauth_problem": "token_rejected",
            "oauth_problem_advice": "Token unknown",
        }
