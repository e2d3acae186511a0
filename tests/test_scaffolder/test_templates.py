"""Tests for template rendering (kitty_cli.scaffolder.templates).

Covers:
- capitalize_first
- TemplateRenderer with a custom template directory
- Generated actions module content
- Success banner
"""

from __future__ import annotations

from pathlib import Path

import pytest

from kitty_cli.config import DEFAULT_DOCS_URL
from kitty_cli.scaffolder.templates import (
    TemplateRenderer,
    capitalize_first,
    render_actions,
    render_banner,
)


pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# capitalize_first
# ---------------------------------------------------------------------------


class TestCapitalizeFirst:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("customer", "Customer"),
            ("Order", "Order"),
            ("bankAccount", "BankAccount"),
            ("x", "X"),
            ("user-profile", "User-profile"),
            ("9lives", "9lives"),
            ("", ""),
        ],
    )
    def test_only_first_character_changes(self, value: str, expected: str):
        assert capitalize_first(value) == expected


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TestTemplateRenderer:
    def test_custom_template_dir(self, tmp_path: Path):
        (tmp_path / "hello.txt.j2").write_text("Hello {{ feature_name }}!\n", encoding="utf-8")
        renderer = TemplateRenderer(tmp_path)
        assert renderer.render("hello.txt.j2", {"feature_name": "orders"}) == "Hello orders!\n"


# ---------------------------------------------------------------------------
# Actions module
# ---------------------------------------------------------------------------


class TestRenderActions:
    def test_imports_come_first(self):
        content = render_actions("customer")
        lines = content.splitlines()
        assert lines[:6] == [
            "import API from '@/instance/api';",
            "import { QueryParams } from '@/hooks/api-request/api-request.types';",
            "import useFetchData from '@/hooks/api-request/use-fetch-data';",
            "import useFetchDetails from '@/hooks/api-request/use-fetch-details-data';",
            "import usePostData from '@/hooks/api-request/use-post-data';",
            "import useUpdateData from '@/hooks/api-request/use-update-data';",
        ]

    def test_customer_functions(self):
        content = render_actions("customer")
        assert "export const useCreateCustomer = () => {" in content
        assert "export const useUpdateCustomer = () => {" in content
        assert "export const useFetchCustomerList = (params: QueryParams) => {" in content
        assert "export const useFetchCustomerDetails = (id: string) => {" in content

    def test_routes_use_raw_feature_name(self):
        content = render_actions("customer")
        assert "url: API.customer.create," in content
        assert "url: API.customer.update," in content
        assert "url: API.customer.list," in content
        assert "url: API.customer.details," in content

    def test_hooks_wrap_request_helpers(self):
        content = render_actions("customer")
        assert "return usePostData({" in content
        assert "return useUpdateData({" in content
        assert "return useFetchData({" in content
        assert "return useFetchDetails({" in content
        assert "    params,\n" in content
        assert "    id,\n" in content

    def test_camel_case_name_keeps_tail(self):
        content = render_actions("bankAccount")
        assert "useCreateBankAccount" in content
        assert "useFetchBankAccountDetails" in content
        assert "API.bankAccount.list" in content

    def test_already_capitalized_name(self):
        content = render_actions("Order")
        assert "useCreateOrder" in content
        assert "API.Order.create" in content

    def test_explicit_capitalized_name(self):
        content = render_actions("customer", "Client")
        assert "useCreateClient" in content
        assert "API.customer.create" in content

    def test_ends_with_single_newline(self):
        content = render_actions("customer")
        assert content.endswith("};\n")
        assert not content.endswith("\n\n")

    def test_is_deterministic(self):
        assert render_actions("customer") == render_actions("customer")

    def test_name_is_not_escaped(self):
        content = render_actions("a<b>&c")
        assert "API.a<b>&c.create" in content


# ---------------------------------------------------------------------------
# Banner
# ---------------------------------------------------------------------------


class TestRenderBanner:
    def test_mentions_feature_and_docs(self):
        banner = render_banner("customer", DEFAULT_DOCS_URL)
        assert 'Module "customer" created successfully inside src/features!' in banner
        assert f"Docs: {DEFAULT_DOCS_URL}" in banner
        assert "Happy Coding!" in banner

    def test_block_letters(self):
        banner = render_banner("customer", DEFAULT_DOCS_URL)
        assert "░█░█░▀█▀░▀█▀░▀█▀░█░█░░░█▀▀░█░░░▀█▀" in banner

    def test_set_off_by_blank_lines(self):
        banner = render_banner("customer", DEFAULT_DOCS_URL)
        assert banner.startswith("\n\n.·:'")

    def test_custom_docs_url(self):
        banner = render_banner("orders", "https://example.test/docs")
        assert "Docs: https://example.test/docs" in banner
