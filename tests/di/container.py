"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, Provider, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from guestbook.util.di import PROVIDERS, Component, get_provider


def build_test_container(
    unmock: set[Component] | None = None,
    replace: dict[Component, Provider] | None = None,
) -> AsyncContainer:
    """Build test container with selective unmocking.

    Settings are loaded from environment variables. Unmocking "persistence"
    assumes a PostgreSQL server reachable at DATABASE__URL with migrations
    applied.

    Args:
        unmock: Components to use production implementations for.
                All others use mocks if available.
        replace: Provider instances standing in for whole components,
                 e.g. persistence that fails on demand

    Returns:
        Configured test container, usable directly or behind create_app()

    Raises:
        ValueError: If unknown components or dependency violations

    Examples:
        # Unit and e2e tests - all mocks
        container = build_test_container()

        # Integration tests - real persistence
        container = build_test_container(unmock={"persistence"})

        # Store failures - listing query fails
        container = build_test_container(
            replace={"persistence": FailingPersistenceProvider("greeting query")}
        )
    """
    unmock = unmock or set()
    replace = replace or {}
    _validate_unmock(unmock)

    provider_instances = []
    for base in PROVIDERS:
        is_mockable = bool(base.__subclasses__())

        if not is_mockable:
            # Concrete provider - always use as-is
            provider_class = get_provider(base, use_mock=False)
        else:
            component_name = getattr(base, "__mock_component__", None)
            if component_name in replace:
                provider_instances.append(replace[component_name])
                continue
            use_mock = component_name not in unmock if component_name else False
            provider_class = get_provider(base, use_mock=use_mock)

        provider_instances.append(provider_class())

    # FastapiProvider lets the same container back a TestClient
    return make_async_container(*provider_instances, FastapiProvider())


def _validate_unmock(unmock: set[Component]) -> None:
    """Validate unmock configuration.

    Args:
        unmock: Set of components to unmock

    Raises:
        ValueError: If unknown components or dependency violations
    """
    mockable_providers = [p for p in PROVIDERS if p.__subclasses__()]
    all_components = {
        getattr(p, "__mock_component__")
        for p in mockable_providers
        if hasattr(p, "__mock_component__")
    }

    unknown = unmock - all_components
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    for base in mockable_providers:
        component_name = getattr(base, "__mock_component__", None)
        if component_name in unmock:
            depends_on = getattr(base, "__depends_on__", set())
            missing = depends_on - unmock
            if missing:
                raise ValueError(
                    f"Component '{component_name}' requires {missing} to be unmocked"
                )
