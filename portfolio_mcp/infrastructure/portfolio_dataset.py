"""Portfolio Dataset — loads the read-only portfolio once and exposes accessors.

Invariants:
    - The dataset is validated in full before the server accepts calls
    - Accessors return tuples of frozen models: nothing downstream can mutate them
    - Load failures raise DatasetLoadError; the server never starts half-loaded

Design Decisions:
    - JSON file when PORTFOLIO_DATA_PATH is set, bundled seed otherwise
    - Entity lookups are linear scans; the dataset is a single person's portfolio
"""

import logging
from pathlib import Path

from pydantic import ValidationError

from portfolio_mcp.core.errors import DatasetLoadError
from portfolio_mcp.infrastructure.seed_portfolio import SEED_PORTFOLIO
from portfolio_mcp.schemas.portfolio import (
    Achievement,
    ContactInfo,
    Portfolio,
    Project,
    Skill,
)

logger = logging.getLogger(__name__)


class PortfolioDataset:
    """Read accessors over one validated Portfolio."""

    def __init__(self, portfolio: Portfolio):
        self._portfolio = portfolio
        self._skills = tuple(portfolio.skills)
        self._projects = tuple(portfolio.projects)
        self._achievements = tuple(portfolio.achievements)

    @property
    def portfolio(self) -> Portfolio:
        return self._portfolio

    @property
    def skills(self) -> tuple[Skill, ...]:
        return self._skills

    @property
    def projects(self) -> tuple[Project, ...]:
        return self._projects

    @property
    def achievements(self) -> tuple[Achievement, ...]:
        return self._achievements

    @property
    def contact(self) -> ContactInfo:
        return self._portfolio.contact

    def counts(self) -> dict[str, int]:
        return {
            "skills": len(self._skills),
            "projects": len(self._projects),
            "achievements": len(self._achievements),
            "socialLinks": len(self.contact.social_links),
        }


def load_dataset(path: Path | str | None = None) -> PortfolioDataset:
    """Load from a JSON file, or the bundled seed when `path` is None."""
    if path is None:
        source = "bundled seed"
        try:
            portfolio = Portfolio.model_validate(SEED_PORTFOLIO)
        except ValidationError as exc:
            raise DatasetLoadError(source, str(exc)) from exc
    else:
        source = str(path)
        try:
            raw = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise DatasetLoadError(source, exc.strerror or str(exc)) from exc
        try:
            portfolio = Portfolio.model_validate_json(raw)
        except ValidationError as exc:
            raise DatasetLoadError(source, str(exc)) from exc

    dataset = PortfolioDataset(portfolio)
    logger.info(f"Portfolio dataset loaded from {source}: {dataset.counts()}")
    return dataset
