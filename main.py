import os
import uuid
from typing import Optional
from fastapi import FastAPI, File, Header, HTTPException, Query, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
import aiofiles
from services.document_processor import DocumentProcessor, ExtractionError
from services.ai_analyzer import AnalysisError
from services.analyzer_backends import build_analyzer
from models.resume_models import ResumeReport, TextAnalysisRequest, rating_for
import config
import logging


# Configure logging
logging.basicConfig(level=config.LOG_LEVEL,
                    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s')
logger = logging.getLogger(__name__)

app = FastAPI(title="Resume Scorer API", version="1.0.0")

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Initialize services
document_processor = DocumentProcessor()

# Ensure upload directory exists
os.makedirs(config.UPLOAD_DIR, exist_ok=True)


@app.get("/")
async def root():
    return {"message": "Resume Scorer API is working"}


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "default_backend": config.ANALYZER_BACKEND,
        "services": {
            "document_processor": "running",
            "heuristic_scorer": "running",
            "ai_analyzer": "configured" if config.OPENAI_API_KEY else "needs api key",
        }
    }


async def run_analysis(text: str, backend: Optional[str], api_key: Optional[str],
                       filename: Optional[str] = None) -> ResumeReport:
    """
    Build the requested analyzer and score the text, mapping analyzer
    failures to HTTP errors
    """
    backend = (backend or config.ANALYZER_BACKEND).lower()
    try:
        analyzer = build_analyzer(backend, api_key)
    except (ValueError, AnalysisError) as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        analysis = await run_in_threadpool(analyzer.analyze_resume, text)
    except AnalysisError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return ResumeReport(
        filename=filename,
        backend=backend,
        rating=rating_for(analysis.score.overall),
        analysis=analysis,
    )


@app.post("/upload-resume", response_model=ResumeReport, response_model_exclude_none=True)
async def upload_resume(
    file: UploadFile = File(...),
    backend: Optional[str] = Query(None, description="heuristic or ai"),
    x_openai_key: Optional[str] = Header(None),
):
    """
    Upload and analyze a resume file (PDF or Word)
    """
    filename = os.path.basename(file.filename or "resume")
    extension = os.path.splitext(filename)[1].lower()
    file_path = None

    try:
        # Validate file type
        if extension not in config.ALLOWED_EXTENSIONS:
            raise HTTPException(status_code=400, detail="Only PDF and Word (.docx) documents are supported")

        # Validate file size; never read more than one byte past the limit
        too_large = HTTPException(status_code=400,
                                  detail=f"File size must be less than {config.MAX_UPLOAD_MB}MB")
        if file.size is not None and file.size > config.MAX_UPLOAD_BYTES:
            raise too_large
        content = await file.read(config.MAX_UPLOAD_BYTES + 1)
        if len(content) > config.MAX_UPLOAD_BYTES:
            raise too_large

        # Save uploaded file
        file_path = os.path.join(config.UPLOAD_DIR, f"{uuid.uuid4().hex}{extension}")
        async with aiofiles.open(file_path, 'wb') as f:
            await f.write(content)

        # Extract text
        logger.info(f"Processing file: {filename}")
        try:
            extracted_text = await run_in_threadpool(document_processor.extract_text, file_path)
        except ExtractionError as e:
            raise HTTPException(status_code=400, detail=str(e))

        report = await run_analysis(extracted_text, backend, x_openai_key, filename)

        logger.info(f"Analysis completed for: {filename}")
        return report

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error processing resume: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error processing resume: {str(e)}")
    finally:
        # Clean up uploaded file
        if file_path and os.path.exists(file_path):
            os.remove(file_path)


@app.post("/analyze-text", response_model=ResumeReport, response_model_exclude_none=True)
async def analyze_text(request: TextAnalysisRequest,
                       x_openai_key: Optional[str] = Header(None)):
    """
    Analyze already-extracted resume text
    """
    logger.info(f"Analyzing {len(request.text)} characters of pasted text")
    return await run_analysis(request.text, request.backend, x_openai_key)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
