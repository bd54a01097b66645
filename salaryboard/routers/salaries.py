"""JSON routes for browsing, analysing and voting on salary entries."""
from __future__ import annotations

from functools import lru_cache

from fastapi import APIRouter, Depends, HTTPException, Query, status

from salaryboard.core.config import get_settings
from salaryboard.core.errors import EntryNotFoundError, InvalidArgumentError
from salaryboard.core.logger import get_logger
from salaryboard.core.security import AuthenticatedUser, get_optional_viewer
from salaryboard.data import InMemorySalaryStore, generate_mock_salaries
from salaryboard.schemas.salaries import SalaryPage, StatsDashboard, VoteRequest, VoteResult
from salaryboard.services import SalariesService
from salaryboard.services.filtering import FilterCriteria

router = APIRouter(prefix="/salaries", tags=["salaries"])
LOGGER = get_logger(__name__)


@lru_cache(maxsize=1)
def get_salaries_service() -> SalariesService:
    """Return the process-wide service backed by the mock data source."""

    settings = get_settings()
    store = InMemorySalaryStore(
        generate_mock_salaries(settings.app.mock_entry_count, seed=settings.app.mock_seed)
    )
    LOGGER.info("Loaded %d salary entries into the in-memory store", len(store))
    return SalariesService(store, settings=settings.app)


def _viewer_key(user: AuthenticatedUser | None) -> str | None:
    if user is None:
        return None
    return str(user.user_id) if user.user_id is not None else user.username


@router.get("", response_model=SalaryPage)
def list_salaries(
    search: str = "",
    country: str | None = None,
    role: str | None = None,
    company: str | None = None,
    experience_level: str | None = None,
    sort: str = Query("newest"),
    service: SalariesService = Depends(get_salaries_service),
    viewer: AuthenticatedUser | None = Depends(get_optional_viewer),
) -> SalaryPage:
    criteria = FilterCriteria.from_params(
        {
            "search": search,
            "country": country,
            "role": role,
            "company": company,
            "experience_level": experience_level,
        }
    )
    try:
        return service.list_salaries(criteria, sort, viewer=_viewer_key(viewer))
    except InvalidArgumentError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc


@router.get("/stats", response_model=StatsDashboard)
def salary_stats(
    country: str | None = None,
    role: str | None = None,
    service: SalariesService = Depends(get_salaries_service),
) -> StatsDashboard:
    criteria = FilterCriteria.from_params({"country": country, "role": role})
    return service.get_stats_dashboard(criteria)


@router.post("/{entry_id}/vote", response_model=VoteResult)
def vote_on_salary(
    entry_id: str,
    payload: VoteRequest,
    service: SalariesService = Depends(get_salaries_service),
    viewer: AuthenticatedUser | None = Depends(get_optional_viewer),
) -> VoteResult:
    try:
        return service.vote(entry_id, payload.direction, viewer=_viewer_key(viewer))
    except EntryNotFoundError as exc:
        LOGGER.warning(str(exc))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except InvalidArgumentError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc
