"""FastAPI backend for BPMN process analysis."""
from pathlib import Path

from fastapi import FastAPI, UploadFile, File, HTTPException
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from lxml import etree

from ..config import Config
from ..generators.report_generator import ReportGenerator
from ..models.process import ProcessAnalysis
from ..parser.exceptions import BpmnParseError
from ..workflow.analyzer import BpmnAnalyzer

app = FastAPI(
    title="bpmnflow API",
    description="BPMN 2.0 process analysis API",
    version="0.1.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "ok"}


async def _analyze_upload(file: UploadFile) -> ProcessAnalysis:
    filename = file.filename or ""
    if Path(filename).suffix.lower() not in Config.ALLOWED_UPLOAD_SUFFIXES:
        raise HTTPException(400, "Only .bpmn or .xml files are allowed")

    content = await file.read()
    if not content:
        raise HTTPException(400, "Uploaded file is empty")
    if len(content) > Config.MAX_UPLOAD_BYTES:
        raise HTTPException(413, f"File exceeds {Config.MAX_UPLOAD_BYTES} bytes")

    try:
        return await run_in_threadpool(BpmnAnalyzer().analyze, content, filename)
    except (BpmnParseError, etree.XMLSyntaxError) as e:
        raise HTTPException(422, str(e))


@app.post("/api/analyze", response_model=ProcessAnalysis)
async def analyze_file(file: UploadFile = File(...)):
    """Analyze an uploaded BPMN file."""
    return await _analyze_upload(file)


@app.post("/api/analyze/report", response_class=PlainTextResponse)
async def analyze_file_report(file: UploadFile = File(...)):
    """Analyze an uploaded BPMN file and return the text report."""
    analysis = await _analyze_upload(file)
    return ReportGenerator().generate(analysis)


def run_server():
    """Run the FastAPI server."""
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)


if __name__ == "__main__":
    run_server()
