from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Union
from pydantic import BaseModel, Field, ConfigDict
from completion_sdk.schemas.models import Model, DEFAULT_MODEL


class CompletionRequest(BaseModel):
    """Parameters of a single ``POST /completions`` call.

    Field constraints noted in the descriptions are enforced by the API,
    not here. Use :meth:`with_changes` to derive a modified request.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    engine: Model = Field(
        default=DEFAULT_MODEL,
        alias="model",
        description="ID of the model to use",
    )
    prompt: str = Field(
        default="",
        description="Prompt to generate completions for; empty starts a new document",
    )
    suffix: Optional[str] = Field(
        default=None, description="Suffix that comes after a completion of inserted text"
    )
    temperature: float = Field(
        default=0.0,
        description="Sampling temperature; 0 means argmax sampling. Alter this or top_p, not both",
    )
    top_p: float = Field(
        default=1.0,
        description="Nucleus sampling probability mass; 0.1 keeps the top 10% of tokens",
    )
    max_tokens: int = Field(
        default=2048,
        description="Maximum tokens to generate; prompt plus max_tokens must fit the context length",
    )
    n: int = Field(default=1, description="How many completions to generate for the prompt")
    stream: bool = Field(
        default=False, description="Stream partial progress (not supported by this client)"
    )
    log_probs: Optional[int] = Field(
        default=None,
        alias="logprobs",
        description="Return log probabilities of the N most likely tokens; the API caps N at 5",
    )
    echo: bool = Field(default=False, description="Echo back the prompt with the completion")
    stop: Optional[Union[str, List[str]]] = Field(
        default=None, description="Up to 4 sequences where generation stops"
    )
    presence_penalty: float = Field(
        default=0.0,
        description="Between -2.0 and 2.0; positive values favour new topics",
    )
    best_of: int = Field(
        default=1,
        description="Candidates generated server-side; must be greater than n",
    )
    user: Optional[str] = Field(
        default=None, description="End-user identifier used for abuse monitoring"
    )

    def with_changes(self, **changes: Any) -> "CompletionRequest":
        unknown = set(changes) - set(type(self).model_fields)
        if unknown:
            raise TypeError(
                f"Unknown CompletionRequest field(s): {', '.join(sorted(unknown))}"
            )
        return type(self).model_validate({**self.model_dump(), **changes})

    def to_wire(self) -> Dict[str, Any]:
        """JSON body as the API expects it; unset optionals are omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Choice(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    text: str
    index: int
    log_probs: Optional[Any] = Field(default=None, alias="logprobs")
    finish_reason: Optional[str] = None


class Usage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    prompt_tokens: int
    completion_tokens: int
    total_tokens: int


class CompletionResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    object: str
    created: int = Field(..., description="Unix timestamp in seconds")
    model: str
    choices: List[Choice]
    usage: Usage

    @property
    def created_at(self) -> datetime:
        return datetime.fromtimestamp(self.created, tz=timezone.utc)


class APIErrorDetail(BaseModel):
    model_config = ConfigDict(extra="ignore")

    message: str
    type: Optional[str] = None
    param: Optional[str] = None
    code: Optional[Union[str, int]] = None


class APIErrorBody(BaseModel):
    """Error payload returned by the API with non-200 statuses."""

    model_config = ConfigDict(extra="ignore")

    error: APIErrorDetail
