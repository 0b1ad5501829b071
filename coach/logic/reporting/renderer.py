"""Result rendering: plan sections from markdown to HTML blocks for the result page."""
from dataclasses import dataclass
from typing import List

import markdown
from markdown.extensions import Extension
from markupsafe import Markup

from coach.domain.GeneratedPlan import GeneratedPlan


class NoRawHtmlExtension(Extension):
    """Treat raw HTML in model output as plain text."""

    def extendMarkdown(self, md):
        md.preprocessors.deregister('html_block')
        md.inlinePatterns.deregister('html')


# NoRawHtmlExtension goes last so it also removes the html_block that "extra" installs
MARKDOWN_EXTENSIONS = ["extra", "sane_lists", NoRawHtmlExtension()]


@dataclass(frozen=True)
class PlanBlock:
    key: str
    title: str
    css_class: str
    html: Markup


def render_markdown(text: str) -> Markup:
    """Convert markdown text to HTML. Raw HTML in the text is shown literally."""
    return Markup(markdown.markdown(text or "", extensions=MARKDOWN_EXTENSIONS))


def render_plan(plan: GeneratedPlan) -> List[PlanBlock]:
    return [
        PlanBlock("training", "Training Plan", "section-training", render_markdown(plan.training)),
        PlanBlock("nutrition", "Nutrition Plan", "section-nutrition", render_markdown(plan.nutrition)),
        PlanBlock("recovery", "Recovery Plan", "section-recovery", render_markdown(plan.recovery)),
    ]
