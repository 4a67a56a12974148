"""3D graph explorer page and overview graph endpoint."""

import logging

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import HTMLResponse, Response

from kgexplorer.api.graph_template import EXPLORER_HTML
from kgexplorer.config import Settings
from kgexplorer.graph import build_overview
from kgexplorer.storage import DatasetState

logger = logging.getLogger(__name__)

router = APIRouter()

# SVG favicon matching the graph theme
FAVICON_SVG = """<svg xmlns='http://www.w3.org/2000/svg' viewBox='0 0 100 100'>
<circle cx='50' cy='50' r='40' fill='#0a0a12' stroke='#5eead4' stroke-width='6'/>
<circle cx='50' cy='50' r='15' fill='#818cf8'/>
<circle cx='30' cy='35' r='8' fill='#34d399'/>
<circle cx='70' cy='35' r='8' fill='#34d399'/>
<line x1='50' y1='50' x2='30' y2='35' stroke='#5eead4' stroke-width='2'/>
<line x1='50' y1='50' x2='70' y2='35' stroke='#5eead4' stroke-width='2'/>
</svg>"""


@router.get("/favicon.ico")
async def favicon() -> Response:
    """Return SVG favicon."""
    return Response(content=FAVICON_SVG, media_type="image/svg+xml")


def get_dataset(request: Request) -> DatasetState:
    """Get the loaded dataset, or 503 if loading failed."""
    dataset: DatasetState | None = getattr(request.app.state, "dataset", None)
    if dataset is None:
        raise HTTPException(status_code=503, detail="Dataset not loaded yet")
    if not dataset.loaded:
        raise HTTPException(status_code=503, detail=dataset.error)
    return dataset


def get_settings(request: Request) -> Settings:
    """Get settings from app state."""
    return request.app.state.settings


@router.get("/graph/data")
async def get_graph_data(request: Request) -> dict:
    """Get the overview graph for the leading triples of the dataset.

    Node ids are normalized so case variants share a node; layout is
    left to the client-side force simulation.
    """
    dataset = get_dataset(request)
    limit = get_settings(request).overview_sample_limit

    overview = build_overview(dataset.triples, sample_limit=limit)
    logger.debug(f"Overview graph: {len(overview.nodes)} nodes, {len(overview.links)} links")
    return overview.to_dict()


@router.get("/", response_class=HTMLResponse)
async def explorer_view() -> str:
    """Serve the 3D graph explorer page."""
    return EXPLORER_HTML
