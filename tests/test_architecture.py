"""Architectural boundary tests using pytest-archon.

These tests verify the ports-and-adapters layering:
- Domain layer has no dependencies on adapters or application
- Application services depend on the domain only
- Adapters don't import application services
"""

from pytest_archon import archrule


def test_domain_models_have_no_dependencies() -> None:
    """Domain models may only import other models and the error taxonomy."""
    (
        archrule("domain models", comment="Domain models should be independent")
        .match("gasoprice.domain.models*")
        .should_not_import("gasoprice.adapters*")
        .should_not_import("gasoprice.application*")
        .should_not_import("gasoprice.domain.contracts*")
        .should_not_import("gasoprice.domain.ports*")
        .should_not_import("aiohttp*")
        .may_import("gasoprice.domain.models*")
        .may_import("gasoprice.domain.errors")
        .check("gasoprice")
    )


def test_domain_errors_are_leaf() -> None:
    """The error taxonomy imports nothing from the package."""
    (
        archrule("domain errors", comment="Errors are importable from anywhere")
        .match("gasoprice.domain.errors")
        .should_not_import("gasoprice*")
        .check("gasoprice")
    )


def test_domain_ports_have_no_dependencies() -> None:
    """Domain ports (interfaces) should not import adapters or application."""
    (
        archrule("domain ports", comment="Domain ports should be independent")
        .match("gasoprice.domain.ports*")
        .should_not_import("gasoprice.adapters*")
        .should_not_import("gasoprice.application*")
        .may_import("gasoprice.domain*")
        .check("gasoprice")
    )


def test_domain_contracts_have_no_dependencies() -> None:
    """Domain contracts (protocols) should not import adapters or application."""
    (
        archrule("domain contracts", comment="Domain contracts should be independent")
        .match("gasoprice.domain.contracts*")
        .should_not_import("gasoprice.adapters*")
        .should_not_import("gasoprice.application*")
        .may_import("gasoprice.domain*")
        .check("gasoprice")
    )


def test_application_services_dont_import_adapters() -> None:
    """Application services should not depend on adapters (infrastructure layer)."""
    (
        archrule(
            "application services", comment="Application services should not depend on adapters"
        )
        .match("gasoprice.application*")
        .should_not_import("gasoprice.adapters*")
        .should_not_import("gasoprice.main")
        .should_not_import("gasoprice.cli")
        .should_not_import("aiohttp*")
        .may_import("gasoprice.domain*")
        .may_import("gasoprice.application*")
        .check("gasoprice")
    )


def test_adapters_dont_import_application() -> None:
    """Adapters should not import application services (to avoid cycles)."""
    (
        archrule(
            "adapters independence", comment="Adapters should not depend on application services"
        )
        .match("gasoprice.adapters*")
        .should_not_import("gasoprice.application*")
        .should_not_import("gasoprice.cli")
        .may_import("gasoprice.domain*")
        .may_import("gasoprice.adapters*")
        .check("gasoprice", only_direct_imports=True)
    )
