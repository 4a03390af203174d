from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_reference_data
from config import settings
from models.requests import AnalyzeRequest, ChatRequest, ExtractRequest, ResolveRequest
from models.responses import ChatResponse, HealthResponse, SkillsResponse
from models.schemas import GapAnalysisResult, RoleDefinition, SkillDefinition
from services import document_parser, gap_analyzer, gemini_client, linkedin_parser, prompt_builder
from services.reference_data import ReferenceData
from services.skill_extractor import extract_skills, resolve_skill_inputs

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)

DEGRADED_REPLY = (
    "The career assistant is unavailable right now. Your gap analysis above still lists "
    "the skills to focus on next."
)


@router.get("/health", response_model=HealthResponse)
async def health(data: ReferenceData = Depends(get_reference_data)):
    return HealthResponse(
        skills_loaded=len(data.skills),
        roles_loaded=len(data.roles),
        assistant_configured=bool(settings.gemini_api_key),
    )


@router.get("/skills", response_model=list[SkillDefinition])
async def list_skills(data: ReferenceData = Depends(get_reference_data)):
    return list(data.skills)


@router.get("/roles", response_model=list[RoleDefinition])
async def list_roles(data: ReferenceData = Depends(get_reference_data)):
    return list(data.roles)


@router.post("/skills/extract", response_model=SkillsResponse)
@limiter.limit(settings.rate_limit)
async def extract(request: Request, body: ExtractRequest, data: ReferenceData = Depends(get_reference_data)):
    if body.source == "linkedin":
        try:
            skills = linkedin_parser.extract_skills_from_profile_text(body.text, data.skills)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
    else:
        skills = extract_skills(body.text, data.skills)
    return SkillsResponse(skills=skills)


@router.post("/skills/extract/resume", response_model=SkillsResponse)
@limiter.limit(settings.rate_limit)
async def extract_resume(
    request: Request,
    resume_file: UploadFile = File(...),
    data: ReferenceData = Depends(get_reference_data),
):
    content = await resume_file.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Max size: {settings.max_upload_size_mb}MB",
        )

    try:
        text = document_parser.extract_text(content, resume_file.filename, resume_file.content_type)
    except document_parser.DocumentParseError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return SkillsResponse(skills=extract_skills(text, data.skills))


@router.post("/skills/resolve", response_model=SkillsResponse)
async def resolve(body: ResolveRequest, data: ReferenceData = Depends(get_reference_data)):
    return SkillsResponse(skills=resolve_skill_inputs(body.inputs, data.skills))


@router.post("/analyze", response_model=GapAnalysisResult)
@limiter.limit(settings.rate_limit)
async def analyze(request: Request, body: AnalyzeRequest, data: ReferenceData = Depends(get_reference_data)):
    role = data.role(body.role_id)
    if role is None:
        raise HTTPException(status_code=404, detail=f"Unknown role: {body.role_id}")

    user_skills = body.skills + resolve_skill_inputs(body.raw_inputs, data.skills)
    return gap_analyzer.analyze(user_skills, role, data.skills)


@router.post("/assistant/chat", response_model=ChatResponse)
@limiter.limit(settings.rate_limit)
async def chat(request: Request, body: ChatRequest, data: ReferenceData = Depends(get_reference_data)):
    system_prompt = prompt_builder.build_assistant_prompt(body.context, data.skills)
    reply = await gemini_client.generate_reply(system_prompt, body.messages)
    if reply is None:
        return ChatResponse(reply=DEGRADED_REPLY, degraded=True)
    return ChatResponse(reply=reply)
