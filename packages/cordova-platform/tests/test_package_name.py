# SPDX-License-Identifier: MIT
"""Tests for package identifier and app name derivation."""

from __future__ import annotations

import pytest
from hypothesis import given, settings, strategies as st

from cordova_platform import PackageNameError, derive_app_name, derive_package_name, sanitize_name
from cordova_platform.package_name import DEFAULT_APP_NAME, FALLBACK_SEGMENT, reverse_domain


class TestDerivePackageName:
    """Tests for derive_package_name."""

    def test_reverses_host_segments(self):
        assert derive_package_name("https://www.example.com/app/index.html") == "com.example.www"

    def test_ignores_port_and_path(self):
        assert derive_package_name("http://app.example.org:8080/start?x=1") == "org.example.app"

    def test_strips_hyphens(self):
        assert derive_package_name("https://my-cool-site.example.com/") == "com.example.mycoolsite"

    def test_host_is_lowercased(self):
        assert derive_package_name("https://WWW.Example.COM/") == "com.example.www"

    def test_reserved_segment_rewritten(self):
        assert derive_package_name("https://shop.example.in/") == "ind.example.shop"

    def test_reserved_segment_rewritten_anywhere(self):
        assert derive_package_name("https://in.example.com/") == "com.example.ind"

    def test_reserved_segment_exposed_by_sanitizing_rewritten(self):
        assert derive_package_name("https://www.1in.com/") == "com.ind.www"
        assert derive_package_name("https://in1.example.com/") == "com.example.in1"

    def test_reserved_token_inside_longer_segment_untouched(self):
        assert derive_package_name("https://www.india.com/") == "com.india.www"
        assert derive_package_name("https://login.example.com/") == "com.example.login"

    def test_single_label_host_gets_fallback_segment(self):
        assert derive_package_name("http://localhost:3000/") == f"localhost.{FALLBACK_SEGMENT}"

    def test_digits_removed_by_sanitizing(self):
        assert derive_package_name("https://3d.example.com/") == "com.example.d"

    def test_url_without_host_rejected(self):
        with pytest.raises(PackageNameError, match="no host"):
            derive_package_name("/relative/start.html")


class TestSanitizeName:
    """Tests for sanitize_name."""

    def test_removes_invalid_characters(self):
        assert sanitize_name("My App!") == "MyApp"

    def test_removes_leading_digits(self):
        assert sanitize_name("123abc") == "abc"

    def test_removes_digits_after_dots(self):
        assert sanitize_name("com.1example.app") == "com.example.app"

    def test_collapses_dots(self):
        assert sanitize_name("com...example") == "com.example"

    def test_removes_leading_dots(self):
        assert sanitize_name(".com.example") == "com.example"

    def test_empty_name_gets_default(self):
        assert sanitize_name("!!!") == DEFAULT_APP_NAME
        assert sanitize_name("") == DEFAULT_APP_NAME

    def test_app_name(self):
        assert derive_app_name("Contoso Weather") == "ContosoWeather"


# =============================================================================
# Property tests
# =============================================================================

labels = st.from_regex(r"[a-z][a-z0-9]{0,9}", fullmatch=True).filter(lambda s: s != "in")


class TestPackageNameProperties:
    """Properties of package name derivation."""

    @given(segments=st.lists(labels, min_size=2, max_size=5))
    @settings(max_examples=100)
    def test_order_reversing_and_dot_joined(self, segments):
        host = ".".join(segments)
        assert reverse_domain(host) == ".".join(reversed(segments))

    @given(segments=st.lists(labels, min_size=1, max_size=5))
    @settings(max_examples=100)
    def test_result_always_has_two_segments(self, segments):
        url = "https://" + ".".join(segments) + "/"
        package_name = derive_package_name(url)
        assert "." in package_name
        assert all(part for part in package_name.split("."))

    @given(segments=st.lists(labels, min_size=1, max_size=4), position=st.integers(0, 4))
    @settings(max_examples=100)
    def test_only_exact_reserved_segment_rewritten(self, segments, position):
        position = min(position, len(segments))
        with_reserved = segments[:position] + ["in"] + segments[position:]
        reversed_parts = reverse_domain(".".join(with_reserved)).split(".")
        assert reversed_parts == [
            "ind" if part == "in" else part for part in reversed(with_reserved)
        ]

    @given(name=st.text(max_size=30))
    @settings(max_examples=200)
    def test_sanitized_name_matches_grammar(self, name):
        sanitized = sanitize_name(name)
        assert sanitized
        assert all(c.isascii() and (c.isalnum() or c == ".") for c in sanitized)
        assert not sanitized[0].isdigit()
        assert not sanitized.startswith(".")
        assert ".." not in sanitized
