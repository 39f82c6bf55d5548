import logging
from typing import Optional
from fastapi import FastAPI, File, UploadFile, Body, HTTPException, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import Response
from pydantic import BaseModel
from engine import handle_xml_bytes, validate_xml_bytes
from renderer import render_error, RenderedResponse, SUCCESS_MESSAGE
from config import get_config

config = get_config()

app = FastAPI(title="XML Envelope Gateway", version="0.1.0")

JSON_ROUTE = "/api/xml/validate"

class XmlRequest(BaseModel):
    xml: str

class OutcomeResponse(BaseModel):
    status: str
    message: str
    variant: Optional[str] = None
    controlId: Optional[str] = None

def _enforce_size(n_bytes: int):
    if n_bytes > config.limits.max_request_bytes:
        raise HTTPException(status_code=413, detail="Payload too large")

def _xml_response(rendered: RenderedResponse) -> Response:
    return Response(content=rendered.body, status_code=rendered.status_code, media_type=rendered.media_type)

def _process(xml_bytes: bytes) -> Response:
    _enforce_size(len(xml_bytes))
    try:
        return _xml_response(handle_xml_bytes(xml_bytes))
    except Exception:
        logging.error("Unexpected failure while handling XML request", exc_info=True)
        return _xml_response(render_error("Internal server error", status_code=500))

@app.exception_handler(HTTPException)
async def xml_http_exception(request: Request, exc: HTTPException):
    if request.url.path == JSON_ROUTE:
        return await http_exception_handler(request, exc)
    return _xml_response(render_error(str(exc.detail), status_code=exc.status_code))

@app.get("/health")
def health():
    return {"status": "ok"}

@app.post("/api/xml")
async def xml_endpoint(request: Request):
    body = await request.body()
    return _process(body)

@app.post("/api/xml/file")
async def xml_file(file: UploadFile = File(...)):
    xml_bytes = await file.read()
    return _process(xml_bytes)

@app.post(JSON_ROUTE, response_model=OutcomeResponse)
def validate_endpoint(req: XmlRequest = Body(...)):
    data = req.xml.encode("utf-8")
    _enforce_size(len(data))
    outcome = validate_xml_bytes(data)
    if outcome.ok:
        return OutcomeResponse(
            status="success",
            message=SUCCESS_MESSAGE,
            variant=outcome.function_variant.value,
            controlId=outcome.control_id,
        )
    return OutcomeResponse(status="error", message=outcome.message)
