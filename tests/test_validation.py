"""Tests for the input validators.

Covers path traversal counting, metacharacter bans, URL/port/interface
shape checks, binary names, path sanitizing, and totality over odd inputs.
"""

import pytest

from sparkle_ssg.validation import (
    MAX_ARGUMENT_LENGTH,
    MAX_PATH_LENGTH,
    MAX_URL_LENGTH,
    command_rejection,
    is_valid_argument,
    is_valid_binary,
    is_valid_interface,
    is_valid_path,
    is_valid_port,
    is_valid_url,
    sanitize_path,
)

ODD_INPUTS = [None, 0, 1.5, True, b"site", ["site"], {"a": 1}, object()]


class TestIsValidPath:
    @pytest.mark.parametrize(
        "path",
        ["site", "content/posts/hello.md", "/srv/site", "a/../b", "./a/./..", "C:\\sites\\blog", "my site"],
    )
    def test_accepts(self, path):
        assert is_valid_path(path) is True

    @pytest.mark.parametrize(
        "path",
        ["..", "../..", "a/b/../../..", "../etc/passwd", "a\\..\\..", "/a/../.."],
    )
    def test_rejects_escaping_root(self, path):
        assert is_valid_path(path) is False

    def test_rejects_empty(self):
        assert is_valid_path("") is False

    def test_rejects_nul(self):
        assert is_valid_path("site\0.md") is False

    def test_length_limit(self):
        assert is_valid_path("a" * MAX_PATH_LENGTH) is True
        assert is_valid_path("a" * (MAX_PATH_LENGTH + 1)) is False

    @pytest.mark.parametrize("char", list(";&|`$(){}[]<>!#*?~"))
    def test_rejects_metacharacters(self, char):
        assert is_valid_path(f"site{char}x") is False


class TestIsValidArgument:
    @pytest.mark.parametrize("arg", ["--drafts", "build", "hello world", "--title=My Book", "wow!#*?~", ""])
    def test_accepts(self, arg):
        assert is_valid_argument(arg) is True

    @pytest.mark.parametrize("char", list(";&|`$(){}[]<>"))
    def test_rejects_metacharacters(self, char):
        assert is_valid_argument(f"value{char}rm") is False

    def test_rejects_nul(self):
        assert is_valid_argument("a\0b") is False

    def test_length_limit(self):
        assert is_valid_argument("x" * MAX_ARGUMENT_LENGTH) is True
        assert is_valid_argument("x" * (MAX_ARGUMENT_LENGTH + 1)) is False


class TestIsValidUrl:
    @pytest.mark.parametrize(
        "url",
        [
            "https://example.com",
            "http://localhost:1111",
            "https://example.com/blog/?page=2#top",
            "HTTPS://EXAMPLE.COM",
            "http://[::1]:8080/",
        ],
    )
    def test_accepts(self, url):
        assert is_valid_url(url) is True

    @pytest.mark.parametrize(
        "url",
        [
            "javascript:alert(1)",
            "ftp://example.com",
            "file:///etc/passwd",
            "not a url",
            "http://",
            "https://example.com:99999",
            "https://example.com:port",
            "http://[::1",
            "http://exa mple.com",
            "http://a^b.com",
            "http://a%zz.com",
            "http://foo\"bar.com",
            "http://-bad.com",
            "http://[not-an-ip]/",
            "",
        ],
    )
    def test_rejects(self, url):
        assert is_valid_url(url) is False

    def test_length_limit(self):
        prefix = "https://example.com/"
        assert is_valid_url(prefix + "a" * (MAX_URL_LENGTH - len(prefix))) is True
        assert is_valid_url(prefix + "a" * MAX_URL_LENGTH) is False


class TestIsValidPort:
    @pytest.mark.parametrize("port", [1, 80, 1111, 8080, 65535])
    def test_accepts(self, port):
        assert is_valid_port(port) is True

    @pytest.mark.parametrize("port", [0, -1, 65536, 3.5, 80.0, "80", True, False, None])
    def test_rejects(self, port):
        assert is_valid_port(port) is False


class TestIsValidInterface:
    @pytest.mark.parametrize(
        "iface",
        ["localhost", "example.com", "my-host.local", "127.0.0.1", "0.0.0.0", "::1", "fe80::1"],
    )
    def test_accepts(self, iface):
        assert is_valid_interface(iface) is True

    @pytest.mark.parametrize(
        "iface",
        ["", "bad host", "-leading.com", "host;rm", "localhost\n", "fe80::1%eth0", "a" * 254],
    )
    def test_rejects(self, iface):
        assert is_valid_interface(iface) is False

    def test_ipv4_is_a_shape_check(self):
        # Octet ranges are not enforced
        assert is_valid_interface("999.999.999.999") is True


class TestIsValidBinary:
    @pytest.mark.parametrize("binary", ["zola", "mdbook", "raco", "tclsh"])
    def test_accepts_plain_names(self, binary):
        assert is_valid_binary(binary) is True

    @pytest.mark.parametrize("binary", ["/usr/bin/zola", "bin/zola", "..\\zola", "ls; rm -rf /", "", None])
    def test_rejects_paths(self, binary):
        assert is_valid_binary(binary) is False
        assert is_valid_binary(binary, strict=False) is False

    def test_strict_rejects_metacharacters_and_whitespace(self):
        assert is_valid_binary("ls;rm") is False
        assert is_valid_binary("zola --help") is False

    def test_lenient_only_rejects_separators(self):
        assert is_valid_binary("ls;rm", strict=False) is True
        assert is_valid_binary("zola --help", strict=False) is True


class TestSanitizePath:
    def test_joins_relative(self):
        assert sanitize_path("/srv/site", "content/post.md") == "/srv/site/content/post.md"

    def test_keeps_absolute(self):
        assert sanitize_path("/srv/site", "/abs/x") == "/abs/x"

    def test_normalizes_separators(self):
        assert sanitize_path("/srv", "a\\b") == "/srv/a/b"
        assert sanitize_path("/srv/site/", "a//b/.") == "/srv/site/a/b"
        assert sanitize_path("/srv", "a/./b") == "/srv/a/b"

    def test_rejects_invalid_user_path(self):
        assert sanitize_path("/srv", "../etc") is None
        assert sanitize_path("/srv", "a;b") is None
        assert sanitize_path("/srv", "") is None
        assert sanitize_path("/srv", None) is None

    def test_confine_rejects_absolute_escape(self):
        assert sanitize_path("/srv/site", "/etc/passwd") == "/etc/passwd"
        assert sanitize_path("/srv/site", "/etc/passwd", confine=True) is None

    def test_confine_keeps_absolute_and_relative_apart(self):
        assert sanitize_path("srv", "/srv/x", confine=True) is None
        assert sanitize_path("srv", "x", confine=True) == "srv/x"

    def test_confine_allows_paths_under_base(self):
        assert sanitize_path("/srv/site", "a/../b", confine=True) == "/srv/site/a/../b"
        assert sanitize_path("/srv/site", "/srv/site/public", confine=True) == "/srv/site/public"


class TestCommandRejection:
    def test_accepts_valid_command(self):
        assert command_rejection("zola", ["build", "--drafts"], "site") is None

    def test_binary_path(self):
        assert command_rejection("/bin/ls", []) == "Invalid binary path"

    def test_binary_name(self):
        assert command_rejection("ls;rm", []) == "Invalid binary name"
        assert command_rejection("ls;rm", [], strict_binary=False) is None

    def test_argument_list_shape(self):
        assert command_rejection("zola", "build") == "Invalid argument list"
        assert command_rejection("zola", None) == "Invalid argument list"

    def test_first_bad_argument_is_reported(self):
        assert command_rejection("zola", ["ok", "a|b", "c;d"]) == "Invalid argument: a|b"

    def test_non_string_argument(self):
        assert command_rejection("zola", ["serve", 8080]) == "Invalid argument: 8080"

    def test_working_directory(self):
        assert command_rejection("zola", ["build"], "../outside") == "Invalid working directory"

    def test_binary_checked_before_arguments(self):
        assert command_rejection("/bin/sh", ["a;b"], "../x") == "Invalid binary path"


class TestTotality:
    @pytest.mark.parametrize(
        "validator",
        [is_valid_path, is_valid_argument, is_valid_url, is_valid_port, is_valid_interface, is_valid_binary],
    )
    @pytest.mark.parametrize("value", ODD_INPUTS)
    def test_never_raises(self, validator, value):
        assert isinstance(validator(value), bool)

    @pytest.mark.parametrize("value", ODD_INPUTS)
    def test_sanitize_never_raises(self, value):
        assert sanitize_path("/srv", value) is None

    @pytest.mark.parametrize(
        "value",
        ["site", "../x", "https://example.com", "localhost", "a;b", "", "8080"],
    )
    def test_results_are_stable(self, value):
        for validator in (is_valid_path, is_valid_argument, is_valid_url, is_valid_interface):
            assert validator(value) == validator(value)
        assert sanitize_path("/srv", value) == sanitize_path("/srv", value)
