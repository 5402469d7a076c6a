"""FastAPI JSON API for the post categorizer."""
import logging

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from src.tagging.colors import color_of, parse_category
from src.tagging.service import get_classifier, list_categories

logger = logging.getLogger("post_categorizer.web")

app = FastAPI(title="Post Categorizer")


class TextIn(BaseModel):
    text: str


class CategoryOut(BaseModel):
    name: str
    color: str


class CategorizeOut(BaseModel):
    category: str
    color: str


class ScoreOut(BaseModel):
    category: str
    raw: float
    weighted: float


class ExplainOut(BaseModel):
    category: str
    matched: dict[str, str]
    scores: list[ScoreOut]


@app.on_event("startup")
async def startup():
    # Build the index up front so configuration errors surface at boot.
    get_classifier()


@app.post("/api/categorize", response_model=CategorizeOut)
async def categorize_view(body: TextIn):
    category = get_classifier().categorize(body.text)
    return CategorizeOut(category=str(category), color=color_of(category))


@app.post("/api/explain", response_model=ExplainOut)
async def explain_view(body: TextIn):
    explanation = get_classifier().explain(body.text)
    scores = [
        ScoreOut(category=str(category), raw=explanation.raw_scores[category], weighted=weighted)
        for category, weighted in explanation.ranking
    ]
    return ExplainOut(
        category=str(explanation.category),
        matched={token: str(cat) for token, cat in explanation.matched.items()},
        scores=scores,
    )


@app.get("/api/categories", response_model=list[CategoryOut])
async def categories_view():
    return [CategoryOut(name=str(c), color=color_of(c)) for c in list_categories()]


@app.get("/api/categories/{name}/color", response_model=CategoryOut)
async def category_color_view(name: str):
    category = parse_category(name)
    if category is None:
        logger.info("Color requested for unknown category %r", name)
        raise HTTPException(status_code=404, detail=f"Unknown category: {name}")
    return CategoryOut(name=str(category), color=color_of(category))
