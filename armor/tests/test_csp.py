# armor/tests/test_csp.py
import pytest
from werkzeug.datastructures import Headers

import armor
from armor import InvalidHeaderValue, csp
from armor.csp import ReportTo, ReportToEndpoint, Source


def test_policy_renders_sorted_directives():
    policy = csp.new()
    (
        policy.default_src(Source.SAME_ORIGIN)
        .default_src("areweasyncyet.rs")
        .script_src(Source.SAME_ORIGIN)
        .script_src(Source.UNSAFE_INLINE)
        .object_src(Source.NONE)
        .base_uri(Source.NONE)
        .upgrade_insecure_requests()
    )
    headers = Headers()
    armor.armor(headers)
    policy.apply(headers)

    assert headers["content-security-policy"] == (
        "base-uri 'none'; default-src 'self' areweasyncyet.rs; object-src 'none'; "
        "script-src 'self' 'unsafe-inline'; upgrade-insecure-requests"
    )
    assert headers["X-Content-Type-Options"] == "nosniff"  # armor headers untouched


def test_several_sources_in_one_call():
    policy = csp.new().default_src(Source.SAME_ORIGIN, "areweasyncyet.rs").object_src(Source.NONE)
    assert policy.value() == "default-src 'self' areweasyncyet.rs; object-src 'none'"


def test_value_is_stable_across_calls():
    policy = csp.new().img_src(Source.DATA, Source.BLOB).block_all_mixed_content()
    first = policy.value()
    assert policy.value() == first
    assert first == "block-all-mixed-content; img-src data: blob:"


def test_default_policy():
    assert csp.ContentSecurityPolicy.default().value() == "object-src 'self'; script-src 'self'"


def test_directive_without_sources_renders_bare_name():
    policy = csp.new().sandbox().default_src(Source.SAME_ORIGIN)
    assert policy.value() == "default-src 'self'; sandbox"

    headers = Headers()
    csp.new().sandbox().apply(headers)
    assert headers["Content-Security-Policy"] == "sandbox"


def test_sandbox_with_tokens():
    policy = csp.new().sandbox("allow-scripts", "allow-forms")
    assert policy.value() == "sandbox allow-scripts allow-forms"


def test_empty_policy():
    assert csp.new().value() == ""


def test_report_only_switches_header():
    headers = Headers()
    csp.new().default_src(Source.SAME_ORIGIN).report_only().apply(headers)
    assert headers["Content-Security-Policy-Report-Only"] == "default-src 'self'"
    assert "Content-Security-Policy" not in headers


def test_apply_overwrites_previous_policy():
    headers = Headers([("Content-Security-Policy", "default-src *")])
    csp.new().default_src(Source.NONE).apply(headers)
    assert headers.getlist("Content-Security-Policy") == ["default-src 'none'"]


def test_report_to_renders_json_without_empty_fields():
    group = ReportTo(
        group="csp-endpoint",
        max_age=10886400,
        endpoints=[ReportToEndpoint(url="https://example.com/csp-reports")],
    )
    bare = ReportTo(max_age=60, endpoints=[], include_subdomains=True)
    policy = csp.new().report_to([group, bare])
    assert policy.value() == (
        'report-to {"group":"csp-endpoint","max_age":10886400,'
        '"endpoints":[{"url":"https://example.com/csp-reports"}]}; '
        'report-to {"max_age":60,"endpoints":[],"include_subdomains":true}'
    )


def test_require_sri_for_and_report_uri():
    policy = csp.new().require_sri_for("script", "style").report_uri("/csp-report")
    assert policy.value() == "report-uri /csp-report; require-sri-for script style"


def test_source_rendering():
    assert str(Source.WILDCARD) == "*"
    assert Source.STRICT_DYNAMIC.value == "'strict-dynamic'"


def test_control_characters_in_source_are_rejected():
    headers = Headers()
    policy = csp.new().connect_src("https://api.example.com\nX-Evil: 1")
    with pytest.raises(InvalidHeaderValue):
        policy.apply(headers)
    assert len(headers) == 0
