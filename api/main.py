# api/main.py
"""
FastAPI backend for Fractal Explorer - exposes the fractal catalog as a read-only REST API.
"""

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from typing import Dict, List, Optional, Any, Union
import sys
from pathlib import Path

# Add project root to path to import fractal_catalog
sys.path.insert(0, str(Path(__file__).parent.parent))

from fractal_catalog import (
    UnknownFractal,
    get_defaults,
    get_enum_value,
    get_menu_config,
    list_fractal_names,
)
from fractal_catalog.validate import find_config_problems


app = FastAPI(
    title="Fractal Catalog API",
    description="Menu schemas, defaults and ids for the fractal renderer",
    version="0.1.0"
)

# CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Request/Response Models
# =============================================================================

class FractalSummary(BaseModel):
    """Name and enum value of a registered fractal."""
    name: str
    enum: int


class ControlData(BaseModel):
    """One control spec, in the front end's shape."""
    type: str
    min: Optional[float] = None
    max: Optional[float] = None
    options: Optional[Union[List[str], Dict[str, str]]] = None


class MenuData(BaseModel):
    """Menu order and controls."""
    menuOrder: List[str]
    controls: Dict[str, ControlData]


class PointData(BaseModel):
    x: float
    y: float


class ViewportData(BaseModel):
    center: PointData
    range: PointData


class DefaultsData(BaseModel):
    """Default parameter values and initial viewport."""
    config: Dict[str, float]
    viewport: ViewportData


class FractalDetail(BaseModel):
    """Everything the catalog knows about one fractal."""
    name: str
    enum: int
    menu: MenuData
    defaults: DefaultsData


class ConfigCheckRequest(BaseModel):
    """Parameter values to check against a fractal's controls."""
    config: Dict[str, float] = Field(default_factory=dict, description="Parameter name -> value")


class ConfigCheckResult(BaseModel):
    ok: bool
    problems: List[str]


# =============================================================================
# Lookups
# =============================================================================

def lookup(fn, name: str):
    """Call a catalog accessor, turning UnknownFractal into a 404."""
    try:
        return fn(name)
    except UnknownFractal as e:
        raise HTTPException(status_code=404, detail=str(e))


def detail_for(name: str) -> FractalDetail:
    return FractalDetail(
        name=name,
        enum=lookup(get_enum_value, name),
        menu=MenuData(**lookup(get_menu_config, name).to_dict()),
        defaults=DefaultsData(**lookup(get_defaults, name).to_dict()),
    )


# =============================================================================
# API Endpoints
# =============================================================================

@app.get("/")
async def root():
    """Health check."""
    return {"status": "ok", "service": "Fractal Catalog API"}


@app.get("/api/fractals", response_model=List[FractalSummary])
async def list_fractals():
    """All registered fractals, in declaration order."""
    return [FractalSummary(name=n, enum=get_enum_value(n)) for n in list_fractal_names()]


@app.get("/api/fractals/{name}", response_model=FractalDetail)
async def get_fractal(name: str):
    return detail_for(name)


@app.get("/api/fractals/{name}/menu", response_model=MenuData)
async def get_menu(name: str):
    return MenuData(**lookup(get_menu_config, name).to_dict())


@app.get("/api/fractals/{name}/defaults", response_model=DefaultsData)
async def get_fractal_defaults(name: str):
    return DefaultsData(**lookup(get_defaults, name).to_dict())


@app.get("/api/fractals/{name}/enum")
async def get_fractal_enum(name: str) -> Dict[str, Any]:
    return {"name": name, "enum": lookup(get_enum_value, name)}


@app.post("/api/fractals/{name}/check", response_model=ConfigCheckResult)
async def check_config(name: str, request: ConfigCheckRequest):
    """Check user-supplied values against the fractal's control bounds."""
    definition = lookup(get_menu_config, name)
    problems = find_config_problems(name, definition, request.config)
    return ConfigCheckResult(ok=not problems, problems=problems)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
