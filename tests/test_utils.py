"""
Tests for utility functions and exceptions.
"""

import pytest

from calendly_client.config import CalendlyConfig
from calendly_client.exceptions import APIError, CalendlyError, ValidationError
from calendly_client.utils import extract_uuid, validate_choices, drop_none


class TestExtractUuid:
    """Tests for extract_uuid function."""
    
    def test_plain_id(self):
        """Test plain identifiers are unchanged."""
        assert extract_uuid("ABC", "webhook_subscriptions") == "ABC"
    
    def test_uri(self):
        """Test collection URIs are reduced to the last segment."""
        uri = "https://api.calendly.com/webhook_subscriptions/ABC/"
        assert extract_uuid(uri, "webhook_subscriptions") == "ABC"
    
    def test_relative_path_unchanged(self):
        """Test ids containing a slash are not shortened."""
        assert extract_uuid("team/ABC", "webhook_subscriptions") == "team/ABC"
    
    def test_other_collection_unchanged(self):
        """Test URIs of another resource type are not shortened."""
        uri = "https://api.calendly.com/users/USR"
        assert extract_uuid(uri, "webhook_subscriptions") == uri
    
    def test_empty(self):
        """Test empty input."""
        assert extract_uuid("", "webhook_subscriptions") == ""


class TestValidateChoices:
    """Tests for validate_choices function."""
    
    def test_valid(self):
        """Test accepted values are returned in order."""
        assert validate_choices(["b", "a"], ["a", "b"]) == ["b", "a"]
    
    def test_empty(self):
        """Test an empty list is valid."""
        assert validate_choices([], ["a"]) == []
    
    def test_invalid(self):
        """Test an unknown value is rejected."""
        with pytest.raises(ValueError):
            validate_choices(["a", "c"], ["a", "b"])


class TestDropNone:
    """Tests for drop_none function."""
    
    def test_drops_none_only(self):
        """Test falsy values other than None are kept."""
        assert drop_none({"a": None, "b": 0, "c": ""}) == {"b": 0, "c": ""}
    
    def test_none_input(self):
        """Test None input gives an empty dict."""
        assert drop_none(None) == {}


class TestExceptions:
    """Tests for the exception hierarchy."""
    
    def test_api_error_fields(self):
        """Test APIError carries status and body."""
        error = APIError("nope", status_code=404, response_data={"message": "nope"})
        
        assert isinstance(error, CalendlyError)
        assert str(error) == "nope"
        assert error.code == 404
        assert error.response_data == {"message": "nope"}
    
    def test_api_error_defaults(self):
        """Test APIError defaults."""
        error = APIError("down")
        
        assert error.status_code == 0
        assert error.response_data == {}
    
    def test_validation_error_is_not_api_error(self):
        """Test validation failures are a separate kind."""
        assert not issubclass(ValidationError, APIError)
        assert issubclass(ValidationError, CalendlyError)


class TestConfig:
    """Tests for CalendlyConfig."""
    
    def test_repr_hides_token(self):
        """Test the token does not leak into repr."""
        assert "s3cret" not in repr(CalendlyConfig(token="s3cret"))
    
    def test_auth_header(self):
        """Test the Authorization header value."""
        assert CalendlyConfig(token="t").auth_header() == "Bearer t"
