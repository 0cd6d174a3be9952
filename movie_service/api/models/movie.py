"""
Pydantic schemas for Movie API.
"""

from enum import Enum
from typing import Annotated, Any, Optional

from pydantic import (
    AfterValidator,
    AnyUrl,
    BaseModel,
    ConfigDict,
    Field,
    Strict,
    TypeAdapter,
    ValidationError,
    ValidationInfo,
    field_validator,
)
from pydantic_core import PydanticCustomError


class Genre(str, Enum):
    """Closed set of genre tags a movie may carry."""

    ACTION = "Action"
    ADVENTURE = "Adventure"
    COMEDY = "Comedy"
    DRAMA = "Drama"
    FANTASY = "Fantasy"
    HORROR = "Horror"
    MYSTERY = "Mystery"
    THRILLER = "Thriller"
    WESTERN = "Western"
    SCI_FI = "Sci-Fi"
    ANIMATION = "Animation"
    DOCUMENTARY = "Documentary"
    FAMILY = "Family"
    MUSIC = "Music"
    ROMANCE = "Romance"
    WAR = "War"
    CRIME = "Crime"
    HISTORY = "History"
    TV_MOVIE = "TV Movie"
    FOREIGN = "Foreign"
    REALITY = "Reality"
    NEWS = "News"
    TALK = "Talk"
    SOAP = "Soap"
    WAR_AND_POLITICS = "War & Politics"
    SCI_FI_AND_FANTASY = "Sci-Fi & Fantasy"
    KIDS = "Kids"
    ACTION_AND_ADVENTURE = "Action & Adventure"


_url_adapter = TypeAdapter(AnyUrl)


def check_poster_url(value: str) -> str:
    """Accept any string that parses as an absolute URL; keep it unchanged."""
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        raise PydanticCustomError("url_parsing", "Poster must be a valid URL") from None
    return value


Title = Annotated[str, Strict(), Field(min_length=1)]
Year = Annotated[int, Strict(), Field(ge=1900, le=2026)]
Genres = Annotated[list[Genre], Field(min_length=1)]
Director = Annotated[str, Strict()]
Duration = Annotated[int, Strict(), Field(gt=0)]
Poster = Annotated[str, Strict(), AfterValidator(check_poster_url)]
Rate = Annotated[float, Strict(), Field(ge=0, le=10)]


class MovieCreate(BaseModel):
    """Request body for creating a movie. Unknown keys (including id) are dropped."""

    title: Title
    year: Year
    genre: Genres
    director: Director
    duration: Duration
    poster: Poster
    rate: Rate = 5


class MovieUpdate(BaseModel):
    """Request body for partially updating a movie (all fields optional)."""

    title: Optional[Title] = None
    year: Optional[Year] = None
    genre: Optional[Genres] = None
    director: Optional[Director] = None
    duration: Optional[Duration] = None
    poster: Optional[Poster] = None
    rate: Optional[Rate] = None

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, value: Any, info: ValidationInfo) -> Any:
        # Omitted fields never reach validators, so None here was sent explicitly.
        if value is None:
            raise PydanticCustomError(
                "null_not_allowed",
                "{field} may be omitted but not set to null",
                {"field": info.field_name},
            )
        return value


class MovieResponse(BaseModel):
    """Response model for a single movie."""

    id: str
    title: str
    year: int
    genre: list[str]
    director: str
    duration: int
    poster: str
    rate: float

    model_config = ConfigDict(from_attributes=True)


class FieldError(BaseModel):
    """One validation problem, keyed by the dotted path of the offending field."""

    field: str
    message: str
    code: str


class ValidationResult(BaseModel):
    """Outcome of validating a movie payload."""

    ok: bool
    data: Optional[dict[str, Any]] = None
    errors: list[FieldError] = Field(default_factory=list)
