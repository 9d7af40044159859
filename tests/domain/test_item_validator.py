"""Tests for ItemValidator domain service."""

from __future__ import annotations

from typing import Any

import pytest

from credential_intake.domain.exceptions import MalformedBatchError
from credential_intake.domain.services import Invalid, ItemValidator, Valid
from credential_intake.domain.value_objects import AuthMethod, CredentialProvider


@pytest.fixture
def validator() -> ItemValidator:
    return ItemValidator()


class TestRefreshToken:
    """Tests for the refreshToken rule."""

    def test_missing_refresh_token(self, validator: ItemValidator) -> None:
        """An item without refreshToken fails on its 1-based line."""
        result = validator.validate({"provider": "Github"}, 0)
        assert result == Invalid(line=1, reason="missing required field refreshToken")

    @pytest.mark.parametrize("token", ["", None, 123, ["abc"]])
    def test_refresh_token_must_be_non_empty_string(
        self, validator: ItemValidator, token: Any
    ) -> None:
        """Empty or non-string tokens are rejected."""
        result = validator.validate({"refreshToken": token, "provider": "Github"}, 4)
        assert isinstance(result, Invalid)
        assert result.line == 5
        assert "refreshToken" in result.reason

    def test_refresh_token_checked_before_provider(self, validator: ItemValidator) -> None:
        """The first failing rule wins."""
        result = validator.validate({"provider": "Twitter"}, 0)
        assert isinstance(result, Invalid)
        assert "refreshToken" in result.reason


class TestProvider:
    """Tests for provider rules."""

    def test_unknown_provider_lists_allowed_values(self, validator: ItemValidator) -> None:
        """An unknown provider names the allowed set."""
        result = validator.validate({"refreshToken": "t", "provider": "Twitter"}, 2)
        assert isinstance(result, Invalid)
        assert result.line == 3
        assert "Twitter" in result.reason
        for allowed in ("BuilderId", "Github", "Google"):
            assert allowed in result.reason

    @pytest.mark.parametrize("provider", ["github", "GOOGLE", "builderid", " Github"])
    def test_provider_match_is_case_sensitive(
        self, validator: ItemValidator, provider: str
    ) -> None:
        """Provider values must match exactly."""
        result = validator.validate({"refreshToken": "t", "provider": provider}, 0)
        assert isinstance(result, Invalid)
        assert "allowed values" in result.reason

    def test_absent_provider_defaults_to_builder_id(self, validator: ItemValidator) -> None:
        """Without a provider the BuilderId rules apply."""
        result = validator.validate({"refreshToken": "t"}, 0)
        assert isinstance(result, Invalid)
        assert result.reason == "provider BuilderId requires clientId and clientSecret"

    def test_null_provider_treated_as_absent(
        self, validator: ItemValidator, builder_id_item: dict[str, Any]
    ) -> None:
        """A null provider falls back to BuilderId."""
        item = {**builder_id_item, "provider": None}
        result = validator.validate(item, 0)
        assert isinstance(result, Valid)
        assert result.item.provider == CredentialProvider.BUILDER_ID

    @pytest.mark.parametrize("provider", ["", 0, False])
    def test_falsy_provider_treated_as_absent(
        self, validator: ItemValidator, builder_id_item: dict[str, Any], provider: Any
    ) -> None:
        """An empty provider falls back to BuilderId like an absent one."""
        item = {**builder_id_item, "provider": provider}
        result = validator.validate(item, 0)
        assert isinstance(result, Valid)
        assert result.item.provider == CredentialProvider.BUILDER_ID

    def test_empty_provider_still_requires_client_fields(self, validator: ItemValidator) -> None:
        result = validator.validate({"refreshToken": "t", "provider": ""}, 0)
        assert result == Invalid(
            line=1, reason="provider BuilderId requires clientId and clientSecret"
        )


class TestBuilderIdRequirements:
    """Tests for BuilderId client fields."""

    def test_missing_client_secret(
        self, validator: ItemValidator, builder_id_item: dict[str, Any]
    ) -> None:
        """BuilderId without clientSecret fails naming the requirement."""
        del builder_id_item["clientSecret"]
        result = validator.validate(builder_id_item, 0)
        assert isinstance(result, Invalid)
        assert "BuilderId" in result.reason
        assert "clientId and clientSecret" in result.reason

    def test_empty_client_id(
        self, validator: ItemValidator, builder_id_item: dict[str, Any]
    ) -> None:
        """Empty strings do not satisfy the requirement."""
        builder_id_item["clientId"] = ""
        assert isinstance(validator.validate(builder_id_item, 0), Invalid)

    @pytest.mark.parametrize(
        ("client_id", "client_secret"),
        [(123, True), ("cid", 1), (["cid"], "secret"), ("cid", {"v": "s"})],
    )
    def test_non_string_client_fields_rejected(
        self,
        validator: ItemValidator,
        builder_id_item: dict[str, Any],
        client_id: Any,
        client_secret: Any,
    ) -> None:
        """Client fields must be non-empty strings, not merely truthy."""
        builder_id_item["clientId"] = client_id
        builder_id_item["clientSecret"] = client_secret
        result = validator.validate(builder_id_item, 0)
        assert result == Invalid(
            line=1, reason="provider BuilderId requires clientId and clientSecret"
        )

    def test_complete_builder_id_item(
        self, validator: ItemValidator, builder_id_item: dict[str, Any]
    ) -> None:
        """A complete BuilderId item is normalized."""
        result = validator.validate(builder_id_item, 0)
        assert isinstance(result, Valid)
        assert result.item.refresh_token == builder_id_item["refreshToken"]
        assert result.item.client_id == builder_id_item["clientId"]
        assert result.item.client_secret == builder_id_item["clientSecret"]
        assert result.item.auth_method == AuthMethod.IDC


class TestSocialProviders:
    """Tests for Github and Google items."""

    def test_github_needs_no_client_fields(
        self, validator: ItemValidator, github_item: dict[str, Any]
    ) -> None:
        result = validator.validate(github_item, 0)
        assert isinstance(result, Valid)
        assert result.item.provider == CredentialProvider.GITHUB
        assert result.item.client_id is None
        assert result.item.auth_method == AuthMethod.SOCIAL

    def test_google_needs_no_client_fields(
        self, validator: ItemValidator, google_item: dict[str, Any]
    ) -> None:
        result = validator.validate(google_item, 0)
        assert isinstance(result, Valid)
        assert result.item.provider == CredentialProvider.GOOGLE


class TestShape:
    """Tests for item and payload shape."""

    @pytest.mark.parametrize("item", ["token", 42, None, ["refreshToken"]])
    def test_non_object_item(self, validator: ItemValidator, item: Any) -> None:
        """Array elements must be objects."""
        result = validator.validate(item, 1)
        assert result == Invalid(line=2, reason="item must be a JSON object")

    @pytest.mark.parametrize("payload", [{"refreshToken": "t"}, "[]", 3, None])
    def test_non_sequence_payload_rejected(self, validator: ItemValidator, payload: Any) -> None:
        """A non-array payload is a batch-level error."""
        with pytest.raises(MalformedBatchError):
            validator.ensure_sequence(payload)

    def test_validate_all_keeps_order(
        self,
        validator: ItemValidator,
        github_item: dict[str, Any],
    ) -> None:
        """One result per item, in input order."""
        results = validator.validate_all([{}, github_item, {"refreshToken": "x"}])
        assert [type(r) for r in results] == [Invalid, Valid, Invalid]
        assert [r.line for r in results if isinstance(r, Invalid)] == [1, 3]

    def test_first_invalid(self, validator: ItemValidator, github_item: dict[str, Any]) -> None:
        """The pre-check reports the first failing line."""
        failing = validator.first_invalid([github_item, {"provider": "Github"}, {}])
        assert failing is not None
        assert failing.line == 2
        assert validator.first_invalid([github_item]) is None

    def test_validation_does_not_mutate_input(
        self, validator: ItemValidator, builder_id_item: dict[str, Any]
    ) -> None:
        snapshot = dict(builder_id_item)
        validator.validate(builder_id_item, 0)
        assert builder_id_item == snapshot
