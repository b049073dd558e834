import pytest

from linkpreview.errors import InvalidURLError, PreviewError
from linkpreview.services.validator import validate_url


def test_validate_url_accepts_http_and_https() -> None:
    assert validate_url("http://example.com/a") == "http://example.com/a"
    assert validate_url("https://example.com/?q=1") == "https://example.com/?q=1"


@pytest.mark.parametrize(
    "link",
    ["ftp://files.example/a", "javascript:alert(1)", "mailto:someone@example.com"],
)
def test_validate_url_rejects_other_schemes(link: str) -> None:
    with pytest.raises(InvalidURLError, match="unsupported scheme"):
        validate_url(link)


@pytest.mark.parametrize("link", ["example.com/a", "/relative/path", "http:///no-host", "http://[::1"])
def test_validate_url_rejects_malformed(link: str) -> None:
    with pytest.raises(InvalidURLError, match="invalid URL"):
        validate_url(link)


def test_validation_errors_share_preview_classification() -> None:
    with pytest.raises(PreviewError):
        validate_url("ftp://files.example/a")
