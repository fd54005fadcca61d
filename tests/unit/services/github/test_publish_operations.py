"""Tests for the per-resource GitHub operations used when publishing."""

import logging

import httpx
import pytest

from application.services.github.api.contents import ContentsOperations
from application.services.github.api.pulls import PullRequestOperations
from application.services.github.api.refs import RefOperations
from application.services.github.api.repositories import RepositoryOperations
from application.services.github.models.results import StatusFailure, Success
from common.exception.exceptions import GitHubRequestError
from tests.fixtures.github_fixtures import REPO_PATH, FakeGitHub, create_test_client


class TestRepositoryOperations:
    """Test RepositoryOperations.get_default_branch."""

    @pytest.mark.asyncio
    async def test_returns_default_branch(self):
        fake = FakeGitHub().route("GET", REPO_PATH, json={"default_branch": "trunk"})
        operations = RepositoryOperations(create_test_client(fake))

        assert await operations.get_default_branch() == "trunk"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [{}, {"default_branch": ""}, {"default_branch": None}])
    async def test_falls_back_to_main(self, payload):
        """Test missing or empty default_branch falls back to main."""
        fake = FakeGitHub().route("GET", REPO_PATH, json=payload)
        operations = RepositoryOperations(create_test_client(fake))

        assert await operations.get_default_branch() == "main"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "route",
        [{"text": "<html>proxy error</html>"}, {"json": ["not", "an", "object"]}],
    )
    async def test_unreadable_metadata_raises(self, route):
        """Test a 200 body that is not a JSON object is a failure, not a fallback."""
        fake = FakeGitHub().route("GET", REPO_PATH, **route)
        operations = RepositoryOperations(create_test_client(fake))

        with pytest.raises(GitHubRequestError) as exc_info:
            await operations.get_default_branch()

        assert exc_info.value.status_code == 200
        assert not exc_info.value.is_unauthorized

    @pytest.mark.asyncio
    async def test_unauthorized_raises_with_response(self):
        """Test 401 error carries status and response."""
        fake = FakeGitHub().route("GET", REPO_PATH, status=401, json={"message": "Bad credentials"})
        operations = RepositoryOperations(create_test_client(fake))

        with pytest.raises(GitHubRequestError) as exc_info:
            await operations.get_default_branch()

        assert exc_info.value.is_unauthorized
        assert exc_info.value.response.status_code == 401
        assert "Bad credentials" in exc_info.value.message


class TestRefOperations:
    """Test RefOperations branch lookups and creation."""

    @pytest.mark.asyncio
    async def test_get_branch_sha(self):
        fake = FakeGitHub().route(
            "GET", f"{REPO_PATH}/git/ref/heads/main", json={"object": {"sha": "deadbeef"}}
        )
        operations = RefOperations(create_test_client(fake))

        assert await operations.get_branch_sha("main") == "deadbeef"

    @pytest.mark.asyncio
    async def test_get_branch_sha_missing_object_raises(self):
        """Test a 200 without object.sha is a failure with status 200."""
        fake = FakeGitHub().route("GET", f"{REPO_PATH}/git/ref/heads/main", json={"ref": "refs/heads/main"})
        operations = RefOperations(create_test_client(fake))

        with pytest.raises(GitHubRequestError) as exc_info:
            await operations.get_branch_sha("main")

        assert exc_info.value.status_code == 200
        assert not exc_info.value.is_unauthorized

    @pytest.mark.asyncio
    async def test_get_branch_sha_not_found_raises(self):
        fake = FakeGitHub().route("GET", f"{REPO_PATH}/git/ref/heads/gone", status=404)
        operations = RefOperations(create_test_client(fake))

        with pytest.raises(GitHubRequestError) as exc_info:
            await operations.get_branch_sha("gone")

        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [201, 422])
    async def test_create_branch_accepts_created_and_existing(self, status):
        fake = FakeGitHub().route("POST", f"{REPO_PATH}/git/refs", status=status, json={})
        operations = RefOperations(create_test_client(fake))

        await operations.create_branch("feature", "abc123")

        assert fake.body("POST", f"{REPO_PATH}/git/refs") == {
            "ref": "refs/heads/feature",
            "sha": "abc123",
        }

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [200, 403, 409, 500])
    async def test_create_branch_rejects_other_statuses(self, status):
        fake = FakeGitHub().route("POST", f"{REPO_PATH}/git/refs", status=status, json={})
        operations = RefOperations(create_test_client(fake))

        with pytest.raises(GitHubRequestError) as exc_info:
            await operations.create_branch("feature", "abc123")

        assert exc_info.value.status_code == status

    @pytest.mark.asyncio
    async def test_create_branch_transport_failure_has_no_status(self):
        fake = FakeGitHub().route("POST", f"{REPO_PATH}/git/refs", error=httpx.ConnectError)
        operations = RefOperations(create_test_client(fake))

        with pytest.raises(GitHubRequestError) as exc_info:
            await operations.create_branch("feature", "abc123")

        assert exc_info.value.status_code is None
        assert exc_info.value.response is None


class TestContentsOperations:
    """Test ContentsOperations probe and upload."""

    @pytest.mark.asyncio
    async def test_get_file_sha_existing_file(self):
        fake = FakeGitHub().route("GET", f"{REPO_PATH}/contents/tokens.json", json={"type": "file", "sha": "abc"})
        operations = ContentsOperations(create_test_client(fake))

        assert await operations.get_file_sha("tokens.json", "feature") == "abc"
        assert fake.requests[0].url.params["ref"] == "feature"

    @pytest.mark.asyncio
    async def test_get_file_sha_missing_file(self):
        fake = FakeGitHub().route("GET", f"{REPO_PATH}/contents/tokens.json", status=404)
        operations = ContentsOperations(create_test_client(fake))

        assert await operations.get_file_sha("tokens.json", "feature") is None

    @pytest.mark.asyncio
    async def test_get_file_sha_directory_listing(self):
        """Test a directory path yields no SHA."""
        fake = FakeGitHub().route("GET", f"{REPO_PATH}/contents/tokens", json=[{"name": "a.json", "sha": "x"}])
        operations = ContentsOperations(create_test_client(fake))

        assert await operations.get_file_sha("tokens", "feature") is None

    @pytest.mark.asyncio
    async def test_get_file_sha_other_status_raises(self):
        fake = FakeGitHub().route("GET", f"{REPO_PATH}/contents/tokens.json", status=403)
        operations = ContentsOperations(create_test_client(fake))

        with pytest.raises(GitHubRequestError) as exc_info:
            await operations.get_file_sha("tokens.json", "feature")

        assert exc_info.value.status_code == 403

    @pytest.mark.asyncio
    async def test_get_file_sha_non_json_body_raises(self):
        fake = FakeGitHub().route("GET", f"{REPO_PATH}/contents/tokens.json", text="<html>proxy error</html>")
        operations = ContentsOperations(create_test_client(fake))

        with pytest.raises(GitHubRequestError) as exc_info:
            await operations.get_file_sha("tokens.json", "feature")

        assert exc_info.value.status_code == 200

    @pytest.mark.asyncio
    @pytest.mark.parametrize("file_path", ["tokens/v1#beta.json", "tokens/what?.json", "tokens/light theme.json"])
    async def test_get_file_sha_escapes_path(self, file_path):
        """Test reserved characters in a file name stay part of the path."""
        fake = FakeGitHub().route("GET", f"{REPO_PATH}/contents/{file_path}", json={"type": "file", "sha": "abc"})
        operations = ContentsOperations(create_test_client(fake))

        assert await operations.get_file_sha(file_path, "feature") == "abc"
        assert fake.requests[0].url.params["ref"] == "feature"
        assert fake.requests[0].url.raw_path.startswith(f"{REPO_PATH}/contents/tokens/".encode())

    @pytest.mark.asyncio
    async def test_get_file_sha_logs_outcome(self, caplog):
        fake = FakeGitHub().route("GET", f"{REPO_PATH}/contents/tokens.json", status=404)
        operations = ContentsOperations(create_test_client(fake))

        with caplog.at_level(logging.INFO, logger="application.services.github.api.contents"):
            await operations.get_file_sha("tokens.json", "feature")

        assert "File tokens.json does not exist on feature" in caplog.text

    @pytest.mark.asyncio
    async def test_put_file_without_sha(self):
        fake = FakeGitHub().route("PUT", f"{REPO_PATH}/contents/tokens.json", status=201, json={})
        operations = ContentsOperations(create_test_client(fake))

        result = await operations.put_file("tokens.json", "e30=", "Add tokens", "feature")

        assert isinstance(result, Success)
        assert fake.body("PUT", f"{REPO_PATH}/contents/tokens.json") == {
            "message": "Add tokens",
            "content": "e30=",
            "branch": "feature",
        }

    @pytest.mark.asyncio
    async def test_put_file_with_sha(self):
        fake = FakeGitHub().route("PUT", f"{REPO_PATH}/contents/tokens.json", json={})
        operations = ContentsOperations(create_test_client(fake))

        await operations.put_file("tokens.json", "e30=", "Update tokens", "feature", sha="abc")

        assert fake.body("PUT", f"{REPO_PATH}/contents/tokens.json")["sha"] == "abc"

    @pytest.mark.asyncio
    async def test_put_file_escapes_path(self):
        fake = FakeGitHub().route("PUT", f"{REPO_PATH}/contents/tokens/v1#beta.json", status=201, json={})
        operations = ContentsOperations(create_test_client(fake))

        result = await operations.put_file("tokens/v1#beta.json", "e30=", "Add tokens", "feature")

        assert isinstance(result, Success)
        assert fake.requests[0].url.raw_path == f"{REPO_PATH}/contents/tokens/v1%23beta.json".encode()

    @pytest.mark.asyncio
    async def test_put_file_returns_failure_without_raising(self):
        fake = FakeGitHub().route("PUT", f"{REPO_PATH}/contents/tokens.json", status=409, json={})
        operations = ContentsOperations(create_test_client(fake))

        result = await operations.put_file("tokens.json", "e30=", "Update tokens", "feature")

        assert isinstance(result, StatusFailure)
        assert result.status_code == 409


class TestPullRequestOperations:
    """Test PullRequestOperations.create_pull_request."""

    @pytest.mark.asyncio
    async def test_create_pull_request_body(self):
        fake = FakeGitHub().route("POST", f"{REPO_PATH}/pulls", status=201, json={"number": 1})
        operations = PullRequestOperations(create_test_client(fake))

        result = await operations.create_pull_request("feature", "main", "Title", "Body")

        assert isinstance(result, Success)
        assert fake.body("POST", f"{REPO_PATH}/pulls") == {
            "title": "Title",
            "head": "feature",
            "base": "main",
            "body": "Body",
        }
