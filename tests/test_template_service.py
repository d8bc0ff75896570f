"""Tests for search text template expansion."""

from datetime import datetime, timedelta, timezone

from prdash.services import template_service
from prdash.services.template_service import expand, has_template


class TestExpand:
    def test_plain_text_untouched(self):
        text = "is:open   author:@me"
        assert expand(text) is text

    def test_now_modify_with_go_layout(self, fixed_now):
        text = 'is:open updated:>={{ nowModify("-2w") | date("2006-01-02") }}'
        assert expand(text, {"now": fixed_now}) == "is:open updated:>=2024-03-01"

    def test_filters_chain(self, fixed_now):
        text = 'created:<{{ now | dateModify("-36h") | date("%Y-%m-%d") }}'
        assert expand(text, {"now": fixed_now}) == "created:<2024-03-14"

    def test_sprout_style_call_order(self, fixed_now):
        assert expand('{{ date("2006-01-02", now) }}', {"now": fixed_now}) == "2024-03-15"
        assert expand('{{ date("2006-01-02", dateModify("-1d", Now)) }}', {"now": fixed_now}) == "2024-03-14"

    def test_ago(self, fixed_now):
        text = "{{ ago(then) }}"
        then = fixed_now - timedelta(days=3)
        assert expand(text, {"now": fixed_now, "then": then}) == "3d"

    def test_to_date(self, fixed_now):
        assert expand('{{ toDate("2006-01-02", "2024-01-31") | date("01/02") }}') == "01/31"

    def test_syntax_error_returns_raw(self):
        text = "is:open {{ nowModify( }}"
        assert expand(text) == text

    def test_undefined_name_returns_raw(self):
        text = "is:open {{ missing }}"
        assert expand(text) == text

    def test_bad_duration_returns_raw(self):
        text = 'updated:>{{ nowModify("soon") | date("2006-01-02") }}'
        assert expand(text) == text

    def test_runtime_error_returns_raw(self):
        text = "is:open {{ 1 // 0 }}"
        assert expand(text) == text

    def test_helper_type_error_returns_raw(self, fixed_now):
        text = "is:open {{ ago(1) }}"
        assert expand(text, {"now": fixed_now}) == text

    def test_sandbox_blocks_internals(self):
        text = "is:open {{ ''.__class__.__mro__[1].__subclasses__() }}"
        assert expand(text) == text

    def test_now_is_read_on_every_call(self, monkeypatch):
        times = iter(
            [
                datetime(2024, 1, 1, tzinfo=timezone.utc),
                datetime(2024, 6, 1, tzinfo=timezone.utc),
            ]
        )
        monkeypatch.setattr(template_service, "current_time", lambda: next(times))
        text = '{{ now | date("2006-01-02") }}'
        assert expand(text) == "2024-01-01"
        assert expand(text) == "2024-06-01"

    def test_has_template(self):
        assert has_template("{{ now }}")
        assert has_template("{% if true %}x{% endif %}")
        assert not has_template("is:open")
        assert not has_template("")
