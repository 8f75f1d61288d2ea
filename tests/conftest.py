"""
Test bootstrap:
- Make tests/helpers importable at collection time
- Provide an Application wired to mock collaborators
- Provide sample API payloads
"""
import sys
import pathlib
import pytest

TESTS_DIR = pathlib.Path(__file__).parent

if str(TESTS_DIR) not in sys.path:
    sys.path.insert(0, str(TESTS_DIR))

from helpers.mocks import MockTransport, MockSigner  # noqa: E402

from xero_client.application import Application  # noqa: E402


CONTACTS_XML = """<Response xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance">
  <Id>6e8b5f2a-0000-4b8f-9c1e-1d2f3a4b5c6d</Id>
  <Status>OK</Status>
  <ProviderName>Test App</ProviderName>
  <DateTimeUTC>2024-03-01T10:00:00</DateTimeUTC>
  <Contacts>
    <Contact>
      <ContactID>bd2270c3-8706-4c11-9cfb-000b551c3f51</ContactID>
      <Name>ABC Limited</Name>
      <Addresses>
        <Address>
          <AddressType>POBOX</AddressType>
          <City>Wellington</City>
        </Address>
        <Address>
          <AddressType>STREET</AddressType>
          <City>Auckland</City>
        </Address>
      </Addresses>
    </Contact>
    <Contact>
      <ContactID>6d42f03b-181f-43e3-93fb-2025c012de92</ContactID>
      <Name>Foo Bar</Name>
      <Phones>
        <Phone>
          <PhoneType>DEFAULT</PhoneType>
          <PhoneNumber>1234567</PhoneNumber>
        </Phone>
      </Phones>
    </Contact>
  </Contacts>
</Response>"""


VALIDATION_ERROR_XML = """<ApiException xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance">
  <ErrorNumber>10</ErrorNumber>
  <Type>ValidationException</Type>
  <Message>A validation exception occurred</Message>
  <Elements>
    <DataContractBase xsi:type="Invoice">
      <ValidationErrors>
        <ValidationError>
          <Message>Email address must be valid.</Message>
        </ValidationError>
      </ValidationErrors>
    </DataContractBase>
  </Elements>
</ApiException>"""


@pytest.fixture
def mock_transport():
    """Transport that never touches the network."""
    return MockTransport()


@pytest.fixture
def mock_signer():
    """Signer that records calls."""
    return MockSigner()


@pytest.fixture
def app(mock_transport, mock_signer):
    """Application wired to the mock transport and signer."""
    return Application(signer=mock_signer, transport=mock_transport)


@pytest.fixture
def contacts_xml():
    return CONTACTS_XML


@pytest.fixture
def validation_error_xml():
    return VALIDATION_ERROR_XML
