"""
interchange_schema.py
- Purpose: The in-memory shape of an imported/exported competency framework.
- Design: Both the JSON and the Markdown codec produce an InterchangeDocument.
  Legacy five-column sub-competencies are normalized into `level_criteria`
  under the legacy key names; translating keys is the migration's job.
"""

from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

from skillframe.constants.levels import legacy_field_for, legacy_level_keys


class InterchangeSubCompetency(BaseModel):
    title: str = Field(min_length=1)
    code: Optional[str] = None
    level_criteria: Dict[str, List[str]] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _normalize_legacy_columns(cls, data: Any) -> Any:
        if not isinstance(data, dict) or data.get("level_criteria") is not None:
            return data
        criteria: Dict[str, Any] = {}
        for key in legacy_level_keys():
            values = data.get(legacy_field_for(key))
            if values:
                criteria[key] = values
        return {**data, "level_criteria": criteria}


class InterchangeCompetency(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(min_length=1)
    code: Optional[str] = None
    description: Optional[str] = None
    sub_competencies: List[InterchangeSubCompetency] = Field(
        default_factory=list,
        validation_alias=AliasChoices("subCompetencies", "sub_competencies"),
        serialization_alias="subCompetencies",
    )


class InterchangeDocument(BaseModel):
    competencies: List[InterchangeCompetency]

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
