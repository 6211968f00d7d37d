from typing import Optional

from fastapi import FastAPI, Request, HTTPException, UploadFile, File
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel

from clippings_app.core.models import OutcomeKind
from clippings_app.core.output import OutputTarget
from clippings_app.core.pipeline import read_and_parse
from clippings_app.utils.paths import get_templates_dir

app = FastAPI()
templates = Jinja2Templates(directory=str(get_templates_dir()))

# The single output the page displays, overwritten by each run
output = OutputTarget()

class ParseResponse(BaseModel):
    kind: str
    status: str
    applied: bool
    highlight_count: int = 0
    markdown: str
    html: str

class OutputResponse(BaseModel):
    status: str
    markdown: str
    html: str

class ToggleResponse(BaseModel):
    index: int
    state: str

@app.get("/", response_class=HTMLResponse)
async def index_view(request: Request):
    """Upload form, status line, markdown and accordion."""
    return templates.TemplateResponse(request, "index.html", {
        "status": output.status,
        "markdown": output.markdown,
        "view_html": output.render_view()
    })

@app.post("/api/parse", response_model=ParseResponse)
async def parse_upload(file: Optional[UploadFile] = File(None)):
    """
    Reads the uploaded export and publishes the result.
    The response always carries what the page should now display.
    """
    if file is None or not file.filename:
        output.show_no_file()
        return ParseResponse(
            kind=OutcomeKind.NO_FILE_SELECTED.value,
            status=output.status,
            applied=True,
            markdown=output.markdown,
            html=output.render_view()
        )

    run_id = output.begin_run(file.filename)
    outcome = await read_and_parse(file.filename, file.read)
    applied = output.publish(run_id, outcome)

    return ParseResponse(
        kind=outcome.kind.value,
        status=output.status,
        applied=applied,
        highlight_count=outcome.highlight_count,
        markdown=output.markdown,
        html=output.render_view()
    )

@app.get("/api/output", response_model=OutputResponse)
async def get_output():
    """Current status line, markdown and accordion html."""
    return OutputResponse(
        status=output.status,
        markdown=output.markdown,
        html=output.render_view()
    )

@app.post("/api/sections/{index}/toggle", response_model=ToggleResponse)
async def toggle_section(index: int):
    """Flips one book section between collapsed and expanded."""
    if output.view is None:
        raise HTTPException(status_code=404, detail="Nothing parsed yet")
    try:
        state = output.view.toggle(index)
    except IndexError:
        raise HTTPException(status_code=404, detail="Section not found")
    return ToggleResponse(index=index, state=state.value)
