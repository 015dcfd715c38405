"""Unit tests for the REST API client."""

import json

import pytest
import requests
import responses

from contract_pusher.client import ApiClient, decode_push_result, split_project_slug
from contract_pusher.exceptions import UploadFailedError
from contract_pusher.types import ApiError, PushedContract

API_URL = "https://api.example.com"
CONTRACTS_URL = f"{API_URL}/api/v1/account/acme/project/demo/contracts"


class TestSplitProjectSlug:
    """Test the split_project_slug function."""

    def test_plain_slug_uses_default_account(self):
        assert split_project_slug("demo", "acme") == ("acme", "demo")

    def test_composite_slug_overrides_account(self):
        assert split_project_slug("alice/demo", "acme") == ("alice", "demo")


class TestDecodePushResult:
    """Test the decode_push_result function."""

    def test_lowercases_pushed_contracts(self):
        result = decode_push_result(
            {"contracts": [{"address": "0xAbC", "network_id": "1"}]}
        )

        assert result.contracts == [PushedContract(address="0xabc", network_id="1")]
        assert result.error is None

    def test_accepts_camel_case_network_id(self):
        result = decode_push_result({"contracts": [{"address": "0xabc", "networkId": "1"}]})

        assert result.contracts[0].network_id == "1"

    def test_numeric_network_id_becomes_string(self):
        result = decode_push_result({"contracts": [{"address": "0xabc", "network_id": 4}]})

        assert result.contracts[0].network_id == "4"

    def test_null_network_id_falls_back_to_camel_case(self):
        result = decode_push_result(
            {"contracts": [{"address": "0xabc", "network_id": None, "networkId": "4"}]}
        )

        assert result.contracts[0].network_id == "4"

    def test_null_network_id_is_empty(self):
        result = decode_push_result({"contracts": [{"address": "0xabc", "network_id": None}]})

        assert result.contracts[0].network_id == ""

    def test_decodes_error(self):
        result = decode_push_result(
            {"error": {"slug": "project_not_found", "message": "Project not found"}}
        )

        assert result.error == ApiError(slug="project_not_found", message="Project not found")
        assert result.contracts == []

    def test_null_contracts(self):
        assert decode_push_result({"contracts": None}).contracts == []

    def test_non_mapping_body(self):
        assert decode_push_result([]).contracts == []


class TestUploadContracts:
    """Test the ApiClient.upload_contracts method."""

    @responses.activate
    def test_posts_payload_with_token(self):
        responses.add(
            responses.POST,
            CONTRACTS_URL,
            json={"contracts": [{"address": "0xabc", "network_id": "1"}]},
            status=200,
        )

        client = ApiClient(API_URL, "secret-token", "acme")
        result = client.upload_contracts({"contracts": [], "tag": "v1"}, "demo")

        assert result.contracts == [PushedContract(address="0xabc", network_id="1")]
        request = responses.calls[0].request
        assert request.headers["Authorization"] == "Bearer secret-token"
        assert json.loads(request.body) == {"contracts": [], "tag": "v1"}

    @responses.activate
    def test_composite_slug_in_url(self):
        responses.add(
            responses.POST,
            f"{API_URL}/api/v1/account/alice/project/demo/contracts",
            json={"contracts": []},
            status=200,
        )

        client = ApiClient(API_URL + "/", "secret-token", "acme")
        client.upload_contracts({"contracts": []}, "alice/demo")

        assert len(responses.calls) == 1

    @responses.activate
    def test_structured_error_is_returned(self):
        responses.add(
            responses.POST,
            CONTRACTS_URL,
            json={"error": {"slug": "forbidden", "message": "You can't push to this project"}},
            status=403,
        )

        client = ApiClient(API_URL, "secret-token", "acme")
        result = client.upload_contracts({"contracts": []}, "demo")

        assert result.error.message == "You can't push to this project"

    @responses.activate
    def test_http_error_without_structured_error_raises(self):
        responses.add(responses.POST, CONTRACTS_URL, json={}, status=500)

        client = ApiClient(API_URL, "secret-token", "acme")

        with pytest.raises(UploadFailedError) as exc_info:
            client.upload_contracts({"contracts": []}, "demo")

        assert "500" in str(exc_info.value)

    @responses.activate
    def test_invalid_json_raises(self):
        responses.add(responses.POST, CONTRACTS_URL, body="<html>oops</html>", status=200)

        client = ApiClient(API_URL, "secret-token", "acme")

        with pytest.raises(UploadFailedError):
            client.upload_contracts({"contracts": []}, "demo")

    @responses.activate
    def test_network_error_raises(self):
        responses.add(
            responses.POST,
            CONTRACTS_URL,
            body=requests.ConnectionError("connection refused"),
        )

        client = ApiClient(API_URL, "secret-token", "acme")

        with pytest.raises(UploadFailedError) as exc_info:
            client.upload_contracts({"contracts": []}, "demo")

        assert exc_info.value.user_message == "Couldn't push contracts to the server"
        assert isinstance(exc_info.value, RuntimeError)
