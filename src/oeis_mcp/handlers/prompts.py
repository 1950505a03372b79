"""
MCP Prompt Endpoint Handlers

Handles prompt listing and retrieval for MCP protocol.
Exposes prompts: sequence_analysis
"""

import logging
from typing import Dict, Any, List

from pydantic import ValidationError

from ..backend.models import SequenceAnalysisRequest, SequenceRecord
from ..errors import from_validation_error, invalid_params
from ..models import (
    PromptDefinition,
    PromptArgument,
    PromptListResponse,
    PromptGetRequest,
    PromptGetResponse,
    PromptMessage,
)
from ..service import OEISService

logger = logging.getLogger(__name__)


def build_user_message(sequence_id: str) -> PromptMessage:
    return PromptMessage(
        role="user",
        content=(
            f"Please provide a comprehensive analysis of OEIS sequence {sequence_id}. Include:\n"
            "1. The definition and meaning of this sequence\n"
            "2. Mathematical properties and patterns\n"
            "3. Real-world applications or significance\n"
            "4. Relationships to other sequences\n"
            "5. Interesting facts or observations"
        ),
    )


def _section(title: str, contents: List[str]) -> str:
    """Render a bold-titled section, or nothing at all for an empty list."""
    if not contents:
        return ""
    body = "\n".join(contents)
    return f"**{title}:**\n{body}\n\n"


def build_assistant_message(sequence: SequenceRecord) -> PromptMessage:
    """
    Render a markdown digest of the sequence.

    Comments, formulas and cross-references are only included when present.
    """
    analysis_context = (
        f"# OEIS Sequence A{sequence.number:06d}\n\n"
        f"**Name:** {sequence.name}\n\n"
        f"**Data (first few terms):** {sequence.data}\n\n"
        f"**Keywords:** {sequence.keyword}\n\n"
        f"{_section('Comments', sequence.comment)}"
        f"{_section('Formulas', sequence.formula)}"
        f"{_section('Cross-references', sequence.xref)}"
    )
    return PromptMessage(role="assistant", content=analysis_context)


async def _sequence_analysis(service: OEISService, request: SequenceAnalysisRequest) -> List[PromptMessage]:
    logger.info(f"Analyzing sequence: {request.sequence_id!r}")
    sequence = await service.find_sequence(request.sequence_id)
    return [
        build_user_message(request.sequence_id),
        build_assistant_message(sequence),
    ]


# Prompt registry
PROMPT_REGISTRY: Dict[str, Dict[str, Any]] = {
    "sequence_analysis": {
        "description": "Analyzes an OEIS sequence in detail, providing mathematical context, patterns, and related sequences",
        "input_model": SequenceAnalysisRequest,
        "arguments": [
            {
                "name": "sequence_id",
                "description": "The OEIS sequence ID to analyze (e.g., \"A000045\")",
                "required": True
            }
        ],
        "handler": _sequence_analysis,
    }
}


async def list_prompts() -> PromptListResponse:
    """
    List all available prompts.
    
    Returns:
        PromptListResponse with list of prompt definitions
    """
    prompts = []
    
    for prompt_id, metadata in PROMPT_REGISTRY.items():
        arguments = [
            PromptArgument(
                name=arg["name"],
                description=arg.get("description"),
                required=arg.get("required", True)
            )
            for arg in metadata.get("arguments", [])
        ]
        
        prompts.append(PromptDefinition(
            name=prompt_id,
            description=metadata.get("description"),
            arguments=arguments
        ))
    
    return PromptListResponse(prompts=prompts)


async def get_prompt(service: OEISService, request: PromptGetRequest) -> PromptGetResponse:
    """
    Render a prompt with its arguments.
    
    Args:
        service: Service wrapping the OEIS backend
        request: Prompt get request with name and arguments
        
    Returns:
        PromptGetResponse with prompt messages
        
    Raises:
        McpError: INVALID_PARAMS if the prompt or sequence is unknown or arguments
            are missing; INTERNAL_ERROR if the backend failed
    """
    prompt_name = request.name
    
    if prompt_name not in PROMPT_REGISTRY:
        raise invalid_params(f"Prompt '{prompt_name}' not found. Available prompts: {list(PROMPT_REGISTRY.keys())}")
    
    metadata = PROMPT_REGISTRY[prompt_name]
    try:
        arguments = metadata["input_model"].model_validate(request.arguments or {})
    except ValidationError as e:
        raise from_validation_error(e) from e
    
    messages = await metadata["handler"](service, arguments)
    return PromptGetResponse(description=metadata["description"], messages=messages)
