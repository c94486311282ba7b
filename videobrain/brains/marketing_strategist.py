"""
Marketing Strategist - Stage 1

Decides WHAT the video says and WHY: the core promise, the emotional arc and
one short key message per narrative beat. Makes no visual decisions.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from videobrain.core.constants import (
    KEY_MESSAGE_IDS,
    MIN_KEY_MESSAGES,
    REQUIRED_KEY_MESSAGE_IDS,
    STRATEGY_PRIORITIES,
    Stage,
    Tone,
)
from videobrain.core.exceptions import ValidationError
from .schema import ShapeChecker
from .templates import render_user_message


# =============================================================================
# SCHEMA DEFINITIONS
# =============================================================================

@dataclass(frozen=True)
class MarketingStrategyInput:
    """Request fields the strategist is allowed to see."""
    user_prompt: str
    language: str
    product_description: Optional[str] = None
    target_audience: Optional[str] = None
    tone: Optional[Tone] = None


@dataclass(frozen=True)
class KeyMessage:
    """One beat of the narrative: the exact on-screen copy and its purpose."""
    id: str
    message: str
    intent: str
    emotional_target: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "id": self.id,
            "message": self.message,
            "intent": self.intent,
            "emotionalTarget": self.emotional_target,
        }


@dataclass(frozen=True)
class MarketingStrategyOutput:
    """Validated stage 1 output. Downstream stages read it, never rewrite it."""
    core_promise: str
    hook_intent: str
    emotional_arc: Tuple[str, ...]
    key_messages: Tuple[KeyMessage, ...]
    audience_insight: str
    differentiator: str
    priority: Optional[str] = None

    def message_for(self, message_id: str) -> Optional[KeyMessage]:
        for key_message in self.key_messages:
            if key_message.id == message_id:
                return key_message
        return None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "corePromise": self.core_promise,
            "hookIntent": self.hook_intent,
            "emotionalArc": list(self.emotional_arc),
            "keyMessages": [m.to_dict() for m in self.key_messages],
            "audienceInsight": self.audience_insight,
            "differentiator": self.differentiator,
        }
        if self.priority is not None:
            data["priority"] = self.priority
        return data


# =============================================================================
# VALIDATION
# =============================================================================

def marketing_output_errors(output: Any) -> List[str]:
    """List every way `output` deviates from the strategy shape."""
    check = ShapeChecker()
    o = check.mapping(output, "$")
    if o is None:
        return check.errors

    check.string(o, "corePromise", "corePromise")
    check.string(o, "hookIntent", "hookIntent")
    check.string_list(o, "emotionalArc", "emotionalArc", min_items=1)
    check.string(o, "audienceInsight", "audienceInsight")
    check.string(o, "differentiator", "differentiator")
    check.enum(o, "priority", STRATEGY_PRIORITIES, "priority", required=False)

    messages = check.sequence(o, "keyMessages", "keyMessages", min_items=MIN_KEY_MESSAGES)
    if messages is None:
        return check.errors

    seen = []
    for i, msg in enumerate(messages):
        path = f"keyMessages[{i}]"
        m = check.mapping(msg, path)
        if m is None:
            continue
        message_id = check.enum(m, "id", KEY_MESSAGE_IDS, f"{path}.id")
        check.string(m, "message", f"{path}.message")
        check.string(m, "intent", f"{path}.intent")
        check.string(m, "emotionalTarget", f"{path}.emotionalTarget")
        if message_id is not None:
            if message_id in seen:
                check.fail(f"{path}.id", f"duplicate key message '{message_id}'")
            seen.append(message_id)

    for required_id in REQUIRED_KEY_MESSAGE_IDS:
        if required_id not in seen:
            check.fail("keyMessages", f"missing required '{required_id}' message")

    return check.errors


def validate_marketing_output(output: Any) -> bool:
    """Pure predicate: True only if `output` is a complete strategy."""
    return not marketing_output_errors(output)


def decode_marketing_output(output: Any) -> MarketingStrategyOutput:
    """
    Decode a JSON value into a MarketingStrategyOutput.

    Raises:
        ValidationError: If any field is missing, mistyped or out of range
    """
    errors = marketing_output_errors(output)
    if errors:
        raise ValidationError(Stage.MARKETING.value, errors)

    return MarketingStrategyOutput(
        core_promise=output["corePromise"],
        hook_intent=output["hookIntent"],
        emotional_arc=tuple(output["emotionalArc"]),
        key_messages=tuple(
            KeyMessage(
                id=m["id"],
                message=m["message"],
                intent=m["intent"],
                emotional_target=m["emotionalTarget"],
            )
            for m in output["keyMessages"]
        ),
        audience_insight=output["audienceInsight"],
        differentiator=output["differentiator"],
        priority=output.get("priority"),
    )


# =============================================================================
# BUILD USER MESSAGE
# =============================================================================

def build_marketing_user_message(stage_input: MarketingStrategyInput) -> str:
    sections = ""
    if stage_input.product_description:
        sections += f"\n\nDESCRIPTION: {stage_input.product_description}"
    if stage_input.target_audience:
        sections += f"\n\nTARGET AUDIENCE: {stage_input.target_audience}"
    if stage_input.tone:
        sections += f"\n\nDESIRED TONE: {stage_input.tone.value}"

    return render_user_message(
        Stage.MARKETING,
        user_prompt=stage_input.user_prompt,
        optional_sections=sections,
        language=stage_input.language,
    )
