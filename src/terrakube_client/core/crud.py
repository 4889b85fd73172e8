from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Generic, List, Optional, Type, TypeVar

from .jsonapi import Resource

if TYPE_CHECKING:
    from .client import APIClient

T = TypeVar("T", bound=Resource)

DEFAULT_FILTER_KEY = "filter"


@dataclass(frozen=True)
class ListOptions:
    """Optional list parameters. ``filter`` is passed through unmodified."""

    filter: Optional[str] = None


def resolve_list_options(
    options: Optional[ListOptions] = None, filter: Optional[str] = None
) -> Optional[ListOptions]:
    if options is not None and filter is not None:
        raise ValueError("Pass either options or filter, not both.")
    if filter is not None:
        return ListOptions(filter=filter)
    return options


class CrudService(Generic[T]):
    """
    Generic JSON:API List/Get/Create/Update/Delete over one entity model.
    Resource services validate their ids, build the path and delegate here.
    """

    model: Type[T]
    filter_key: str = DEFAULT_FILTER_KEY

    def __init__(
        self,
        client: "APIClient",
        model: Optional[Type[T]] = None,
        *,
        filter_key: Optional[str] = None,
    ):
        self.client = client
        if model is not None:
            self.model = model
        if filter_key is not None:
            self.filter_key = filter_key

    def _filter_params(self, options: Optional[ListOptions]) -> Optional[Dict[str, str]]:
        if options is None or not options.filter:
            return None
        return {self.filter_key or DEFAULT_FILTER_KEY: options.filter}

    async def _list(self, path: str, options: Optional[ListOptions] = None) -> List[T]:
        items = await self.client.request(
            "GET",
            path,
            params=self._filter_params(options),
            into=List[self.model],  # type: ignore[name-defined]
            resource=self.model.resource_type,
        )
        return items or []

    async def _get(self, path: str) -> T:
        result = await self.client.request(
            "GET", path, into=self.model, resource=self.model.resource_type
        )
        return result if result is not None else self.model()

    async def _create(self, path: str, entity: T) -> T:
        created = await self.client.request(
            "POST",
            path,
            body=entity,
            into=self.model,
            resource=self.model.resource_type,
        )
        return created if created is not None else self.model()

    async def _update(self, path: str, entity: T) -> T:
        updated = await self.client.request(
            "PATCH",
            path,
            body=entity,
            into=self.model,
            resource=self.model.resource_type,
        )
        return updated if updated is not None else self.model()

    async def _delete(self, path: str) -> None:
        await self.client.request("DELETE", path, resource=self.model.resource_type)


__all__ = ["CrudService", "ListOptions", "resolve_list_options", "DEFAULT_FILTER_KEY"]
