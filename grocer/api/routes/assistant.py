from fastapi import APIRouter

from grocer.api.services import assistant_config, cart_engine

router = APIRouter(prefix="/api/assistant", tags=["assistant"])


@router.get("/capabilities")
def get_assistant_capabilities():
    return cart_engine.get_assistant_capabilities()


@router.get("/prompts")
def get_assistant_prompts():
    """Prompt definitions exactly as configured."""
    return assistant_config["prompts"]


@router.get("/guardrails")
def get_assistant_guardrails():
    return assistant_config["guardrails"]
