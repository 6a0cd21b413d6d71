import pytest

from seo_analyzer.platform.utils.url_validator import validate_url


@pytest.mark.parametrize(
    "url",
    [
        "https://example.com",
        "http://example.com/path?q=1#frag",
        "https://sub.example.co.uk:8443/",
        "HTTPS://EXAMPLE.COM",
        "http://127.0.0.1:8000/",
        "http://[::1]/",
        "https://my_host.example.com./",
    ],
)
def test_accepts_absolute_http_urls(url):
    is_valid, cleaned, error = validate_url(url)
    assert is_valid is True
    assert cleaned == url
    assert error == ""


@pytest.mark.parametrize(
    "url",
    [
        "not-a-url",
        "example.com",
        "ftp://example.com",
        "javascript:alert(1)",
        "mailto:someone@example.com",
        "https://",
        "http://:80",
        "https://example.com:notaport",
        "http://exa mple.com",
        "http://example.com\tpath",
        "https://exa%20mple.com",
        "https://-bad-.example.com",
        "https://example..com",
        "",
        "   ",
    ],
)
def test_rejects_everything_else(url):
    is_valid, _, error = validate_url(url)
    assert is_valid is False
    assert error


def test_surrounding_whitespace_is_stripped():
    is_valid, cleaned, _ = validate_url("  https://example.com \n")
    assert is_valid is True
    assert cleaned == "https://example.com"


def test_non_string_is_rejected():
    is_valid, cleaned, error = validate_url(None)
    assert is_valid is False
    assert cleaned == ""
    assert error == "URL cannot be empty"
