"""Dependency injection container for the resume search tooling."""

from __future__ import annotations

from dependency_injector import containers, providers

from .core import BooleanQueryMatcher, FilterCombinator, ResumeSearch
from .gateways import HostedCandidateGateway, JsonlCandidateGateway
from .pipeline import SearchPipeline


class SearchContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition.

    Gateways take their source (path, URL, key) at call time, e.g.
    ``container.jsonl_gateway(path=...)``; the pipeline takes the gateway.
    """

    query_matcher = providers.Singleton(BooleanQueryMatcher)
    filter_combinator = providers.Singleton(FilterCombinator)

    resume_search = providers.Singleton(
        ResumeSearch,
        matcher=query_matcher,
        combinator=filter_combinator,
    )

    jsonl_gateway = providers.Factory(JsonlCandidateGateway)
    hosted_gateway = providers.Factory(HostedCandidateGateway)

    pipeline = providers.Factory(SearchPipeline, search=resume_search)


def create_container(*, settings: dict | None = None) -> SearchContainer:
    """Instantiate container with optional overrides."""

    container = SearchContainer()

    if not settings or not isinstance(settings, dict):
        return container

    search_settings = settings.get("search") or {}
    if search_settings:
        container.resume_search.override(
            providers.Singleton(
                ResumeSearch,
                matcher=container.query_matcher,
                combinator=container.filter_combinator,
                **search_settings,
            )
        )

    gateway_settings = settings.get("gateway") or {}
    if gateway_settings:
        container.hosted_gateway.override(
            providers.Factory(HostedCandidateGateway, **gateway_settings)
        )

    export_fields = (settings.get("export") or {}).get("fields")
    if export_fields:
        container.pipeline.override(
            providers.Factory(
                SearchPipeline,
                search=container.resume_search,
                export_fields=export_fields,
            )
        )

    return container
