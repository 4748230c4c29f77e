import pytest

from saba.url import Url


def test_url_host():
    url = "http://example.com"
    expected = Url(url=url, host="example.com", port="80", path="", searchpart="")
    assert Url.parse(url) == expected


def test_url_host_port():
    url = "http://example.com:8888"
    expected = Url(url=url, host="example.com", port="8888", path="", searchpart="")
    assert Url.parse(url) == expected


def test_url_host_port_path():
    url = "http://example.com:8888/index.html"
    expected = Url(url=url, host="example.com", port="8888", path="index.html", searchpart="")
    assert Url.parse(url) == expected


def test_url_host_path():
    url = "http://example.com/index.html"
    expected = Url(url=url, host="example.com", port="80", path="index.html", searchpart="")
    assert Url.parse(url) == expected


def test_url_host_port_path_searchquery():
    url = "http://example.com:8888/index.html?a=123&b=456"
    expected = Url(
        url=url,
        host="example.com",
        port="8888",
        path="index.html",
        searchpart="a=123&b=456",
    )
    assert Url.parse(url) == expected


def test_no_scheme():
    with pytest.raises(ValueError, match="Only HTTP scheme is supported."):
        Url.parse("example.com")


def test_unsupported_scheme():
    with pytest.raises(ValueError, match="Only HTTP scheme is supported."):
        Url.parse("https://example.com:8888/index.html")


def test_original_url_is_kept():
    url = "http://example.com:8888/index.html?a=123&b=456"
    assert Url.parse(url).url == url