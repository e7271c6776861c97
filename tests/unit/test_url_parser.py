"""Unit tests for URL parsing."""

import pytest

from rexturl.errors import (
    EmptyInputError,
    InvalidPortError,
    InvalidSchemeError,
    MalformedAuthorityError,
    MissingHostError,
    URLParseError,
)
from rexturl.parsing import ParsedURL, URLParser, parse_url


class TestURLParser:
    """Test suite for URLParser."""

    @pytest.fixture
    def parser(self):
        """Create a lenient URLParser instance."""
        return URLParser()

    def test_basic_parsing(self, parser):
        """Test a simple URL is split into components."""
        result = parser.parse("https://example.com/path")

        assert result.scheme == "https"
        assert result.host == "example.com"
        assert result.port is None
        assert result.path == "/path"
        assert result.query is None
        assert result.fragment is None
        assert result.username is None
        assert result.password is None

    def test_full_url(self, parser):
        """Test every component of a full URL."""
        result = parser.parse("https://user@blog.example.co.uk:8080/posts?q=test#frag")

        assert result.scheme == "https"
        assert result.username == "user"
        assert result.password is None
        assert result.host == "blog.example.co.uk"
        assert result.port == 8080
        assert result.path == "/posts"
        assert result.query == "q=test"
        assert result.fragment == "frag"

    def test_username_and_password(self, parser):
        """Test userinfo splits on its first colon."""
        result = parser.parse("ftp://alice:se:cret@files.example.com/")
        assert result.username == "alice"
        assert result.password == "se:cret"
        assert result.host == "files.example.com"

    def test_userinfo_uses_last_at(self, parser):
        """Test the last '@' separates userinfo from host."""
        result = parser.parse("https://me@corp@example.com/")
        assert result.username == "me@corp"
        assert result.host == "example.com"

    def test_empty_userinfo_parts_are_absent(self, parser):
        """Test empty username/password become None."""
        result = parser.parse("https://:pw@example.com")
        assert result.username is None
        assert result.password == "pw"

        result = parser.parse("https://@example.com")
        assert result.username is None
        assert result.password is None

    def test_scheme_lowercased(self, parser):
        """Test scheme and host are lower-cased."""
        result = parser.parse("HTTPS://Example.COM/Path")
        assert result.scheme == "https"
        assert result.host == "example.com"
        # Path case is preserved
        assert result.path == "/Path"

    def test_scheme_allowed_characters(self, parser):
        """Test scheme may contain '+', '-' and '.'."""
        result = parser.parse("svn+ssh://repo.example.com/trunk")
        assert result.scheme == "svn+ssh"

    def test_default_path(self, parser):
        """Test missing path is normalized to '/'."""
        assert parser.parse("https://example.com").path == "/"
        assert parser.parse("https://example.com/").path == "/"
        assert parser.parse("https://example.com?a=1").path == "/"

    def test_empty_query_and_fragment(self, parser):
        """Test empty query and fragment are absent."""
        result = parser.parse("https://example.com?")
        assert result.query is None

        result = parser.parse("https://example.com#")
        assert result.fragment is None

    def test_fragment_before_query_delimiter(self, parser):
        """Test '?' after '#' belongs to the fragment."""
        result = parser.parse("https://example.com/p#frag?notquery")
        assert result.fragment == "frag?notquery"
        assert result.query is None
        assert result.path == "/p"

    def test_query_not_decoded(self, parser):
        """Test query keeps percent-encoding."""
        result = parser.parse("https://example.com/search?q=a%20b&x=1")
        assert result.query == "q=a%20b&x=1"

    def test_query_may_contain_slashes(self, parser):
        """Test slashes in the query do not split the path."""
        result = parser.parse("https://example.com?next=/a/b")
        assert result.path == "/"
        assert result.query == "next=/a/b"

    def test_ipv6_host(self, parser):
        """Test bracketed IPv6 literal with port."""
        result = parser.parse("http://[2001:db8::1]:8080/index.html")
        assert result.host == "2001:db8::1"
        assert result.port == 8080
        assert result.path == "/index.html"
        assert result.is_ipv6

    def test_ipv6_host_without_port(self, parser):
        """Test bracketed IPv6 literal without port."""
        result = parser.parse("http://[::1]/")
        assert result.host == "::1"
        assert result.port is None

    def test_ipv4_host(self, parser):
        """Test IPv4 host with port."""
        result = parser.parse("http://192.168.0.1:3000/api")
        assert result.host == "192.168.0.1"
        assert result.port == 3000
        assert not result.is_ipv6

    def test_port_bounds(self, parser):
        """Test port range is [0, 65535]."""
        assert parser.parse("http://example.com:0").port == 0
        assert parser.parse("http://example.com:65535").port == 65535

        with pytest.raises(InvalidPortError):
            parser.parse("http://example.com:65536")

    def test_invalid_ports(self, parser):
        """Test non-numeric and empty ports are rejected."""
        for url in (
            "http://example.com:abc/",
            "http://example.com:/",
            "http://example.com:+80/",
            "http://example.com:123456/",
            "http://[::1]:/",
        ):
            with pytest.raises(InvalidPortError):
                parser.parse(url)

    def test_empty_input(self, parser):
        """Test empty or blank input raises EmptyInputError."""
        with pytest.raises(EmptyInputError):
            parser.parse("")

        with pytest.raises(EmptyInputError):
            parser.parse("   ")

    def test_invalid_scheme(self, parser):
        """Test bad schemes raise InvalidSchemeError."""
        with pytest.raises(InvalidSchemeError):
            parser.parse("://example.com")

        with pytest.raises(InvalidSchemeError):
            parser.parse("ht tp://example.com")

        with pytest.raises(InvalidSchemeError):
            parser.parse("h_t://example.com")

    def test_missing_host(self, parser):
        """Test URLs without a host raise MissingHostError."""
        with pytest.raises(MissingHostError):
            parser.parse("https://")

        with pytest.raises(MissingHostError):
            parser.parse("https:///path")

        with pytest.raises(MissingHostError):
            parser.parse("https://user@:8080/")

    def test_unterminated_ipv6(self, parser):
        """Test a missing ']' raises MalformedAuthorityError."""
        with pytest.raises(MalformedAuthorityError):
            parser.parse("http://[::1/path")

    def test_garbage_after_ipv6(self, parser):
        """Test only ':port' may follow an IPv6 literal."""
        with pytest.raises(MalformedAuthorityError):
            parser.parse("http://[::1]x/")

    def test_whitespace_in_host(self, parser):
        """Test hosts containing whitespace are rejected."""
        for url in (
            "http:// example.com",
            "http://ex ample.com/",
            "http://example.com\t:80/",
            "user@ example.com/path",
        ):
            with pytest.raises(MalformedAuthorityError):
                parser.parse(url)

    def test_whitespace_outside_host_kept(self, parser):
        """Test whitespace in the path does not affect the host."""
        result = parser.parse("https://www.example.com/path with spaces")
        assert result.host == "www.example.com"
        assert result.path == "/path with spaces"

    def test_errors_are_value_errors(self, parser):
        """Test parse errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            parser.parse("")

        with pytest.raises(URLParseError) as exc_info:
            parser.parse("https://example.com:99999")
        assert exc_info.value.code == "invalid_port"
        assert exc_info.value.raw == "https://example.com:99999"

    def test_surrounding_whitespace_ignored(self, parser):
        """Test leading and trailing whitespace is stripped."""
        result = parser.parse("  https://example.com/a  \n")
        assert result.host == "example.com"
        assert result.path == "/a"


class TestLenientParsing:
    """Test parsing of inputs without an explicit scheme."""

    @pytest.fixture
    def parser(self):
        return URLParser()

    def test_bare_host_and_path(self, parser):
        """Test 'example.com/path' gets the default scheme."""
        result = parser.parse("example.com/path")
        assert result.scheme == "https"
        assert result.host == "example.com"
        assert result.path == "/path"

    def test_bare_word_is_host(self, parser):
        """Test text without '/', ':' or '.' is accepted as a host."""
        result = parser.parse("not-a-url")
        assert result.scheme == "https"
        assert result.host == "not-a-url"
        assert result.path == "/"

    def test_host_with_port(self, parser):
        """Test 'localhost:8080' is host and port, not a scheme."""
        result = parser.parse("localhost:8080/health")
        assert result.scheme == "https"
        assert result.host == "localhost"
        assert result.port == 8080
        assert result.path == "/health"

    def test_protocol_relative(self, parser):
        """Test a leading '//' is skipped."""
        result = parser.parse("//cdn.example.com/lib.js")
        assert result.host == "cdn.example.com"
        assert result.path == "/lib.js"

    def test_path_only_has_no_host(self, parser):
        """Test a bare path cannot yield a host."""
        with pytest.raises(MissingHostError):
            parser.parse("/just/a/path")

    def test_custom_default_scheme(self):
        """Test the default scheme is configurable."""
        parser = URLParser(default_scheme="HTTP")
        assert parser.parse("example.com").scheme == "http"

    def test_invalid_default_scheme(self):
        """Test an invalid default scheme is rejected."""
        with pytest.raises(ValueError):
            URLParser(default_scheme="not a scheme")

    def test_require_scheme(self):
        """Test strict parser rejects inputs without '://'."""
        parser = URLParser(require_scheme=True)
        with pytest.raises(InvalidSchemeError):
            parser.parse("example.com/path")

        assert parser.parse("http://example.com").scheme == "http"


class TestParseUrlFunction:
    """Test the module-level parse_url helper."""

    def test_parse_url(self):
        result = parse_url("http://example.org")
        assert isinstance(result, ParsedURL)
        assert result.host == "example.org"

    def test_immutability(self):
        """Test ParsedURL is immutable (frozen)."""
        result = parse_url("http://example.org")
        with pytest.raises(Exception):  # FrozenInstanceError
            result.host = "other.org"
