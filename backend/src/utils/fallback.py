import time
from datetime import datetime, timedelta, timezone
from types import MappingProxyType
from typing import List, Mapping, NamedTuple, Tuple

from schemes.news import ArticleOut
from utils.enums import Category


class FallbackEntry(NamedTuple):
    title: str
    description: str
    source: str
    age_hours: int


ID_PREFIXES = MappingProxyType({
    Category.TECHNOLOGY: "tech",
    Category.BUSINESS: "biz",
    Category.SCIENCE: "sci",
    Category.SPORTS: "sports",
    Category.ENTERTAINMENT: "ent",
})

# ---------- CORPUS ----------
FALLBACK_CORPUS: Mapping[Category, Tuple[FallbackEntry, ...]] = MappingProxyType({
    Category.TECHNOLOGY: (
        FallbackEntry("AI Breakthrough: New Model Outperforms Humans in Reasoning",
                      "Groundbreaking AI system demonstrates superior performance in complex logical tasks",
                      "Tech Insider", 0),
        FallbackEntry("Quantum Computer Reaches 1000-Qubit Milestone",
                      "Scientists achieve unprecedented quantum computing power with new processor design",
                      "Quantum Computing Weekly", 1),
        FallbackEntry("Revolutionary Battery Tech Promises 7-Day Phone Life",
                      "New solid-state batteries could transform mobile device endurance",
                      "Tech Innovation News", 2),
        FallbackEntry("Major Software Update Brings AI to Millions of Devices",
                      "Latest OS release integrates artificial intelligence across all applications",
                      "Digital Trends", 3),
        FallbackEntry("Cybersecurity Firm Discovers Critical Vulnerability",
                      "Major security flaw affects millions of devices worldwide, patch released",
                      "Security Today", 4),
        FallbackEntry("SpaceX Launches Next-Generation Internet Satellites",
                      "New satellite constellation promises global high-speed internet coverage",
                      "Space Tech News", 5),
    ),
    Category.BUSINESS: (
        FallbackEntry("Global Markets Surge to Record Highs Amid Economic Boom",
                      "Stock indices worldwide reach unprecedented levels as economy shows strong growth",
                      "Financial Times", 0),
        FallbackEntry("Tech Giant Announces $50 Billion Strategic Acquisition",
                      "Major technology company makes largest acquisition in industry history",
                      "Wall Street Journal", 1),
        FallbackEntry("Startup Valuation Soars to $10 Billion in Latest Funding",
                      "AI-powered platform attracts massive investment from venture capital firms",
                      "Business Insider", 2),
        FallbackEntry("Central Banks Announce Coordinated Economic Measures",
                      "Global financial institutions take unprecedented steps to stabilize markets",
                      "Economic Review", 3),
        FallbackEntry("Renewable Energy Investments Reach Record $500 Billion",
                      "Global shift to clean energy accelerates with massive capital inflows",
                      "Green Business Weekly", 4),
    ),
    Category.SCIENCE: (
        FallbackEntry("NASA Discovers Earth-Like Planet in Habitable Zone",
                      "New exoplanet discovery raises possibilities of extraterrestrial life",
                      "Science Journal", 0),
        FallbackEntry("Breakthrough Cancer Treatment Shows 90% Success Rate",
                      "Revolutionary immunotherapy approach demonstrates unprecedented results",
                      "Medical Research Today", 1),
        FallbackEntry("Climate Scientists Confirm Critical Tipping Point",
                      "New research reveals irreversible climate changes already underway",
                      "Environmental Science Review", 2),
        FallbackEntry("Genetic Engineering Breakthrough Could End Disease",
                      "Scientists develop revolutionary gene-editing technique with medical applications",
                      "Biotech Innovations", 3),
        FallbackEntry("Archaeologists Uncover Ancient Lost City",
                      "Major discovery reveals previously unknown civilization from 3000 BC",
                      "Archaeology Today", 4),
    ),
    Category.SPORTS: (
        FallbackEntry("Underdog Team Wins Championship in Historic Upset",
                      "Last-place team completes miraculous season turnaround to claim title",
                      "ESPN", 0),
        FallbackEntry("Record-Breaking Performance Stuns Sports World",
                      "Athlete sets new world record that experts called impossible",
                      "Sports Illustrated", 1),
        FallbackEntry("International Tournament Delivers Unforgettable Final",
                      "Championship game goes into overtime with dramatic conclusion",
                      "Global Sports Network", 2),
        FallbackEntry("Legendary Coach Announces Retirement After 40 Years",
                      "Sports icon steps down after unprecedented championship career",
                      "Athletic Review", 3),
        FallbackEntry("New Stadium Breaks Ground with Revolutionary Design",
                      "State-of-the-art sports venue promises enhanced fan experience",
                      "Stadium Innovations", 4),
    ),
    Category.ENTERTAINMENT: (
        FallbackEntry("Blockbuster Film Shatters Box Office Records",
                      "Latest franchise installment becomes fastest to reach $1 billion worldwide",
                      "Entertainment Weekly", 0),
        FallbackEntry("Award Show Delivers Surprising Winners and Memorable Moments",
                      "Annual ceremony features unexpected victories and viral performances",
                      "Hollywood Reporter", 1),
        FallbackEntry("Streaming Service Announces Major Content Expansion",
                      "Platform to add hundreds of new titles in global market push",
                      "Digital Entertainment News", 2),
        FallbackEntry("Music Icon Returns with First Album in Decade",
                      "Highly anticipated release breaks pre-order records worldwide",
                      "Music Today", 3),
        FallbackEntry("Virtual Reality Concert Attracts Millions of Viewers",
                      "Groundbreaking entertainment experience sets new industry standards",
                      "Tech Entertainment", 4),
    ),
})


def materialize(category: Category, entries: Tuple[FallbackEntry, ...]) -> List[ArticleOut]:
    """Turns corpus entries into articles with fresh ids and timestamps relative to now."""
    now, millis = datetime.now(timezone.utc), int(time.time() * 1000)
    prefix = ID_PREFIXES[category]
    return [
        ArticleOut(
            id=f"{prefix}-{millis}-{n}",
            title=e.title,
            description=e.description,
            source=e.source,
            published_at=(now - timedelta(hours=e.age_hours)).isoformat(),
            category=category,
        )
        for n, e in enumerate(entries, start=1)
    ]


def corpus_articles(category: Category) -> List[ArticleOut]:
    return materialize(category, FALLBACK_CORPUS[category])


__all__ = ["FallbackEntry", "FALLBACK_CORPUS", "corpus_articles", "materialize"]
