"""Tests for naming module."""

import pytest

from group_naming.exceptions import InvalidGroupError, ValidationError
from group_naming.naming import (
    DEFAULT_DELIMITER,
    DEFAULT_PREFIX,
    DELIMITER_ENV_VAR,
    PREFIX_ENV_VAR,
    is_valid_group,
    resolve_delimiter,
    resolve_prefix,
    validate_group,
)


class TestValidateGroup:
    """Test validate_group function."""

    def test_valid_simple_group(self) -> None:
        """Valid simple group passes."""
        validate_group("mycluster")  # No exception

    def test_valid_hyphenated_group(self) -> None:
        """Groups may contain the delimiter character."""
        validate_group("my-cluster")  # No exception

    def test_valid_alphanumeric(self) -> None:
        """Valid alphanumeric group passes."""
        validate_group("web123")  # No exception

    def test_valid_starts_with_number(self) -> None:
        """Groups are not required to start with a letter."""
        validate_group("1cluster")  # No exception

    def test_valid_mixed_case_with_hyphens(self) -> None:
        """Valid mixed case with hyphens passes."""
        validate_group("My-Cluster-123")  # No exception

    def test_empty_group_raises(self) -> None:
        """Empty group raises InvalidGroupError."""
        with pytest.raises(InvalidGroupError) as exc_info:
            validate_group("")
        assert exc_info.value.field == "group"
        assert exc_info.value.value == ""
        assert "cannot be empty" in exc_info.value.reason

    def test_non_string_raises(self) -> None:
        """None is not a group."""
        with pytest.raises(InvalidGroupError):
            validate_group(None)  # type: ignore[arg-type]

    def test_underscore_raises_helpful_message(self) -> None:
        """Underscore raises with helpful message about using hyphens."""
        with pytest.raises(InvalidGroupError) as exc_info:
            validate_group("my_cluster")
        assert "underscore" in exc_info.value.reason.lower()
        assert "hyphen" in exc_info.value.reason.lower()
        assert exc_info.value.value == "my_cluster"

    def test_period_raises(self) -> None:
        """Period raises InvalidGroupError."""
        with pytest.raises(InvalidGroupError) as exc_info:
            validate_group("my.cluster")
        assert "period" in exc_info.value.reason.lower()

    def test_space_raises_helpful_message(self) -> None:
        """Space raises with helpful message about using hyphens."""
        with pytest.raises(InvalidGroupError) as exc_info:
            validate_group("my cluster")
        assert "space" in exc_info.value.reason.lower()

    def test_special_chars_raise(self) -> None:
        """Special characters raise InvalidGroupError."""
        for char in ["@", "!", "$", "%", "&", "*", "(", ")", "+", "#", "/", ":"]:
            with pytest.raises(InvalidGroupError):
                validate_group(f"my{char}cluster")

    def test_is_validation_error(self) -> None:
        """InvalidGroupError is catchable as ValidationError."""
        with pytest.raises(ValidationError):
            validate_group("")


class TestIsValidGroup:
    """Test non-raising is_valid_group."""

    def test_valid(self) -> None:
        """Hyphenated group is valid."""
        assert is_valid_group("my-cluster") is True

    def test_invalid(self) -> None:
        """Invalid values return False instead of raising."""
        assert is_valid_group("my_cluster") is False
        assert is_valid_group("") is False
        assert is_valid_group(None) is False
        assert is_valid_group(42) is False


class TestResolvePrefix:
    """Test prefix resolution order."""

    def test_default(self) -> None:
        """Falls back to the default prefix."""
        assert resolve_prefix(None) == DEFAULT_PREFIX == "jclouds"

    def test_explicit_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Explicit argument wins over env var."""
        monkeypatch.setenv(PREFIX_ENV_VAR, "fromenv")
        assert resolve_prefix("explicit") == "explicit"

    def test_env_var(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Env var wins over default."""
        monkeypatch.setenv(PREFIX_ENV_VAR, "fromenv")
        assert resolve_prefix(None) == "fromenv"

    def test_empty_explicit_means_no_prefix(self) -> None:
        """An explicit empty prefix is kept."""
        assert resolve_prefix("") == ""

    def test_empty_env_means_no_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """An empty env var disables the prefix."""
        monkeypatch.setenv(PREFIX_ENV_VAR, "")
        assert resolve_prefix(None) == ""


class TestResolveDelimiter:
    """Test delimiter resolution order."""

    def test_default(self) -> None:
        """Falls back to the default delimiter."""
        assert resolve_delimiter(None) == DEFAULT_DELIMITER == "-"

    def test_env_var(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Env var wins over default."""
        monkeypatch.setenv(DELIMITER_ENV_VAR, "#")
        assert resolve_delimiter(None) == "#"

    def test_explicit_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Explicit argument wins over env var."""
        monkeypatch.setenv(DELIMITER_ENV_VAR, "#")
        assert resolve_delimiter(".") == "."

    def test_empty_explicit_kept(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """An explicit empty delimiter is passed through for validation to reject."""
        monkeypatch.setenv(DELIMITER_ENV_VAR, "#")
        assert resolve_delimiter("") == ""

    def test_empty_env_falls_back_to_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """An empty env var falls back to the default delimiter."""
        monkeypatch.setenv(DELIMITER_ENV_VAR, "")
        assert resolve_delimiter(None) == "-"


class TestEdgeCases:
    """Test edge cases and boundary conditions."""

    def test_unicode_raises(self) -> None:
        """Unicode characters raise InvalidGroupError."""
        with pytest.raises(InvalidGroupError):
            validate_group("café")

    def test_tab_raises(self) -> None:
        """Tab character raises InvalidGroupError."""
        with pytest.raises(InvalidGroupError):
            validate_group("my\tcluster")

    def test_trailing_newline_raises(self) -> None:
        """Trailing newline is not accepted by the pattern."""
        with pytest.raises(InvalidGroupError):
            validate_group("mycluster\n")

    def test_consecutive_hyphens_valid(self) -> None:
        """Consecutive hyphens are valid."""
        validate_group("my--cluster")  # No exception

    def test_single_char_valid(self) -> None:
        """Single character group is valid."""
        validate_group("a")  # No exception
