"""
Credentials Secret Client Tests
"""

import logging

import pytest

from git_credentials.libs.core.exceptions import AuthenticationError, ParsingError, SecretLookupError
from git_credentials.libs.credentials import SecretClient

from test_constants import CommonTestConstants as Constants, TestUtilities


def test_secret_data_is_decoded():
    secret = TestUtilities.secret(Constants.SECRET_NAME, {"user": "bot", "token": "tok123", "url": Constants.GITHUB_URL})
    core_api = TestUtilities.core_api(read_secret=secret)

    data = SecretClient(core_api).get_secret_data(Constants.SECRET_NAME, Constants.NAMESPACE)

    assert data == {"user": b"bot", "token": b"tok123", "url": Constants.GITHUB_URL.encode()}
    core_api.read_namespaced_secret.assert_called_once_with(Constants.SECRET_NAME, Constants.NAMESPACE)


def test_missing_secret_yields_empty_data(caplog):
    core_api = TestUtilities.core_api(read_secret=TestUtilities.api_exception(404, "Not Found"))

    with caplog.at_level(logging.WARNING):
        data = SecretClient(core_api).get_secret_data(Constants.SECRET_NAME, Constants.NAMESPACE)

    assert data == {}
    assert any(Constants.SECRET_NAME in r.getMessage() for r in caplog.records)


def test_other_api_errors_are_lookup_errors():
    core_api = TestUtilities.core_api(read_secret=TestUtilities.api_exception(403, "Forbidden"))

    with pytest.raises(SecretLookupError) as excinfo:
        SecretClient(core_api).get_secret_data(Constants.SECRET_NAME, Constants.NAMESPACE)

    error = excinfo.value
    assert isinstance(error, LookupError)
    assert (error.secret_name, error.namespace) == (Constants.SECRET_NAME, Constants.NAMESPACE)
    assert str(error).startswith(
        f"failed to find secret '{Constants.SECRET_NAME}' in namespace '{Constants.NAMESPACE}'"
    )


def test_connection_failures_are_lookup_errors():
    core_api = TestUtilities.core_api(read_secret=ConnectionError("connection refused"))

    with pytest.raises(SecretLookupError):
        SecretClient(core_api).get_secret_data(Constants.SECRET_NAME, Constants.NAMESPACE)


def test_invalid_base64_is_a_parsing_error():
    secret = TestUtilities.secret(Constants.SECRET_NAME, {})
    secret.data = {"user": "not base64!"}
    core_api = TestUtilities.core_api(read_secret=secret)

    with pytest.raises(ParsingError):
        SecretClient(core_api).get_secret_data(Constants.SECRET_NAME, Constants.NAMESPACE)


def test_client_requires_core_api():
    with pytest.raises(AuthenticationError, match="not configured"):
        SecretClient(None)
