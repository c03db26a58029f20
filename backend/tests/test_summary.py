import pytest

from utils.summary import DEGRADED_MODEL, MODEL, summarize

ARTICLE = {
    "id": "tech-1",
    "title": "Quantum Computer Reaches 1000-Qubit Milestone",
    "description": "Scientists achieve unprecedented quantum computing power",
    "category": "Technology",
}


async def test_full_summary_fills_template():
    out = await summarize(ARTICLE, delay=0)

    assert out.model == MODEL
    assert out.summary.startswith("**Article Summary**")
    assert f"**Title:** {ARTICLE['title']}" in out.summary
    assert f"• {ARTICLE['description']}" in out.summary
    assert "development in the Technology" in out.summary
    assert "**Overall Analysis:**" in out.summary


async def test_full_summary_defaults_category():
    out = await summarize({k: v for k, v in ARTICLE.items() if k != "category"}, delay=0)
    assert "development in the industry" in out.summary


async def test_processing_time_reflects_delay():
    out = await summarize(ARTICLE, delay=0.01)
    assert out.processing_time == "0.0s"
    out = await summarize(ARTICLE, delay=2.0)
    assert out.processing_time == "2.0s"


@pytest.mark.parametrize("article", [None, "just a string", {}, {"title": "Only title"}, {"description": "Only text"}])
async def test_malformed_article_gets_degraded_template(article):
    out = await summarize(article, delay=0)

    assert out.model == DEGRADED_MODEL
    assert out.processing_time == "1.0s"
    assert "**Main Points:**" in out.summary


async def test_degraded_template_keeps_present_fields():
    out = await summarize({"title": "Only title"}, delay=0)
    assert "**Title:** Only title" in out.summary
    assert "No description available" in out.summary
