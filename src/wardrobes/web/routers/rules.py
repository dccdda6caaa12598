"""Rule set validation endpoints."""

from fastapi import APIRouter

from wardrobes.application.config import ConfigError, load_rules_from_dict, validate_rules
from wardrobes.web.schemas.requests import RulesValidateRequest
from wardrobes.web.schemas.responses import RuleIssueSchema, RuleValidationResponse

router = APIRouter(prefix="/rules", tags=["rules"])


@router.post("/validate", response_model=RuleValidationResponse)
async def validate_rule_set(request: RulesValidateRequest) -> RuleValidationResponse:
    """Validate a rule set without pricing anything.

    Invalid documents are reported in the body rather than as an error
    status, so an editor can show every problem at once.
    """
    try:
        rule_set = load_rules_from_dict(request.rules)
    except ConfigError as e:
        errors = [
            RuleIssueSchema(
                path=d.get("path", "root"), message=d.get("message", e.message)
            )
            for d in e.details
        ]
        return RuleValidationResponse(
            is_valid=False,
            errors=errors or [RuleIssueSchema(path="root", message=e.message)],
        )

    result = validate_rules(rule_set)
    return RuleValidationResponse(
        is_valid=result.is_valid,
        rule_count=len(rule_set.rules),
        warnings=[
            RuleIssueSchema(path=w.path, message=w.message) for w in result.warnings
        ],
    )
