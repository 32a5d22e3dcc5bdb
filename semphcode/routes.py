# --- include all imports here ---
import openai
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse, Response, StreamingResponse

import config
from semphcode import llm
from semphcode.packaging import build_archive, get_project_name
from semphcode.logger import get_logger
from semphcode.models import (
    GenerationRequest,
    ChatRequest,
    ExportRequest,
    ErrorEnvelope,
    ImageApiKey,
    ImageApiKeys,
)

logger = get_logger(__name__)


router = APIRouter()


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content=ErrorEnvelope(message=message).model_dump()
    )


def get_image_api_keys() -> ImageApiKeys:
    """Default provider for image search keys, read from config"""
    return ImageApiKeys(
        unsplash=ImageApiKey(
            api_key=config.UNSPLASH_API_KEY, enabled=bool(config.UNSPLASH_API_KEY)
        ),
        pixabay=ImageApiKey(
            api_key=config.PIXABAY_API_KEY, enabled=bool(config.PIXABAY_API_KEY)
        ),
        pexels=ImageApiKey(
            api_key=config.PEXELS_API_KEY, enabled=bool(config.PEXELS_API_KEY)
        ),
    )


@router.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "message": "SemphCode relay is running"}


@router.get("/api/image-api-keys")
def image_api_keys(keys: ImageApiKeys = Depends(get_image_api_keys)):
    """Expose image search keys to the editor"""
    return keys.model_dump(by_alias=True)


@router.post("/api/deepseek")
async def generate_html(request: GenerationRequest):
    """Stream a generated HTML page as plain text"""
    logger.info(f"Generation requested, prompt length: {len(request.prompt)}")

    if not request.prompt:
        return error_response(400, "Missing required field: prompt")

    if llm.deepseek_client is None:
        return error_response(400, "DeepSeek API key is not configured")

    messages = llm.build_messages(request.prompt, request.html, request.previous_prompt)

    try:
        stream = await llm.open_stream(messages)
    except openai.APIStatusError as e:
        logger.error(f"DeepSeek returned status {e.status_code}: {e.message}")
        return error_response(
            e.status_code, e.message or "Error connecting to the DeepSeek API"
        )
    except Exception as e:
        logger.error(f"Error contacting DeepSeek: {str(e)}", exc_info=True)
        return error_response(500, str(e) or "Error communicating with the DeepSeek API")

    return StreamingResponse(
        llm.iter_html(stream),
        media_type="text/plain",
        headers={"Cache-Control": "no-cache", "Connection": "keep-alive"},
    )


@router.post("/api/ask-ai")
async def ask_ai(request: GenerationRequest):
    """Compatibility alias for /api/deepseek"""
    logger.info("Forwarding /api/ask-ai request to /api/deepseek")
    return await generate_html(request)


@router.post("/api/chat")
async def chat(request: ChatRequest):
    """Answer a programming question"""
    if not request.prompt:
        return error_response(400, "Missing required field: prompt")

    if llm.deepseek_client is None:
        return error_response(400, "DeepSeek API key is not configured")

    try:
        content = await llm.complete_chat(request.prompt, request.context)
        return {"ok": True, "content": content}
    except openai.APIStatusError as e:
        logger.error(f"DeepSeek chat returned status {e.status_code}: {e.message}")
        return error_response(
            e.status_code, e.message or "Error connecting to the DeepSeek API"
        )
    except Exception as e:
        logger.error(f"Error in DeepSeek chat: {str(e)}", exc_info=True)
        return error_response(500, str(e) or "Error communicating with the DeepSeek API")


@router.post("/api/export")
async def export_project(request: ExportRequest):
    """Download the page as a zipped multi-file project"""
    if not request.html:
        raise HTTPException(status_code=400, detail="No HTML content to export")

    try:
        archive = build_archive(request.html)
        filename = f"{get_project_name(request.html)}.zip"
        logger.info(f"Exporting project archive: {filename}")
        return Response(
            content=archive,
            media_type="application/zip",
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )
    except Exception as e:
        logger.error(f"Failed to build project archive: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=500, detail=f"Failed to build archive: {str(e)}"
        )
