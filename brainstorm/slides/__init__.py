"""BrainstormBuddy presentation model.

Builds the fixed eleven-slide deck for a ``ProjectAnalysis``, lets callers
page through it with clamped navigation, previews slides in the terminal and
exports the deck to PowerPoint.

Usage::

    from brainstorm.slides import PptxDeckExporter, SlideNavigator, to_slides

    slides = to_slides(analysis, idea)
    nav = SlideNavigator(slides)
    nav.next()
    path = await PptxDeckExporter().export(slides, DeckMetadata.for_idea(idea), out_dir)
"""

from brainstorm.slides.models import (
    CodeSlide,
    CodeStructure,
    FeaturesSlide,
    GoalsSlide,
    ResourcesContent,
    ResourcesSlide,
    RiskRow,
    RisksSlide,
    Slide,
    SlideKind,
    SlideListAdapter,
    StepsSlide,
    SummarySlide,
    TechStackSlide,
    TimelineSlide,
    TitleSlide,
)
from brainstorm.slides.generator import SLIDE_ORDER, to_slides
from brainstorm.slides.navigator import SlideNavigator
from brainstorm.slides.exporter import (
    DeckExporter,
    DeckExportError,
    DeckMetadata,
    PptxDeckExporter,
    deck_filename,
)

__all__ = [
    "to_slides",
    "SLIDE_ORDER",
    "SlideNavigator",
    "DeckExporter",
    "DeckExportError",
    "DeckMetadata",
    "PptxDeckExporter",
    "deck_filename",
    "Slide",
    "SlideKind",
    "SlideListAdapter",
    "CodeSlide",
    "CodeStructure",
    "FeaturesSlide",
    "GoalsSlide",
    "ResourcesContent",
    "ResourcesSlide",
    "RiskRow",
    "RisksSlide",
    "StepsSlide",
    "SummarySlide",
    "TechStackSlide",
    "TimelineSlide",
    "TitleSlide",
]
