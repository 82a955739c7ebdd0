from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse

from texttools.api.analysis import AnalysisRequest, ensure_text_size

router = APIRouter(prefix="/export", tags=["Export"])

EXPORT_FILENAME = "text-content.txt"


@router.post("", response_class=PlainTextResponse)
def export_text(request: AnalysisRequest) -> PlainTextResponse:
    """Returns the submitted text as a downloadable .txt file.

    Args:
        request (AnalysisRequest): The text to export.

    Returns:
        PlainTextResponse: The text with an attachment Content-Disposition.

    Raises:
        HTTPException: If the text is empty or too large.
    """
    text = ensure_text_size(request.text)

    if not text.strip():
        raise HTTPException(
            status_code=400, detail="Please enter some text before downloading."
        )

    return PlainTextResponse(
        content=text,
        headers={"Content-Disposition": f'attachment; filename="{EXPORT_FILENAME}"'},
    )
