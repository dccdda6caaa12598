"""Service factory for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass

from wardrobes.domain.entities import Catalog
from wardrobes.domain.services import CutListBuilder

from .commands import QuoteCommand
from .context_builder import RuleContextBuilder


@dataclass
class ServiceFactory:
    """Creates services bound to one catalog snapshot.

    Each call creates fresh service instances; the catalog is shared and
    read-only.
    """

    catalog: Catalog

    def create_cut_list_builder(self) -> CutListBuilder:
        return CutListBuilder(self.catalog)

    def create_context_builder(self) -> RuleContextBuilder:
        return RuleContextBuilder(self.catalog)

    def create_quote_command(self) -> QuoteCommand:
        return QuoteCommand(
            self.catalog,
            cut_list_builder=self.create_cut_list_builder(),
            context_builder=self.create_context_builder(),
        )


def get_factory(catalog: Catalog) -> ServiceFactory:
    """Create a ServiceFactory for ``catalog``."""
    return ServiceFactory(catalog=catalog)
