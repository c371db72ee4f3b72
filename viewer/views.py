import logging

from django.http import Http404
from django.views.generic import TemplateView

from . import conf
from .content import build_navigation, card_href, group_by_category
from .storage import ContentSource, UnknownSection

logger = logging.getLogger(__name__)


class HomeView(TemplateView):
    """
    Homepage with one block of showcase cards per configured section.
    """

    template_name = "viewer/index.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        source = ContentSource()

        showcases = []
        for name, section in conf.get_sections().items():
            cards = [
                {"card": card, "href": card_href(name, card.link)}
                for card in source.load_showcase(name)
            ]
            showcases.append({"name": name, "title": section.get("title", name), "cards": cards})

        context["showcases"] = showcases
        return context


class SectionView(TemplateView):
    """
    Section page: sidebar navigation plus either the category-grouped
    article list or, with ``?path=``, one rendered article and its TOC.
    """

    template_name = "viewer/section.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        name = self.kwargs["section"]
        source = ContentSource()

        try:
            section = source.section(name)
        except UnknownSection:
            raise Http404(f"Unknown section '{name}'")

        articles = source.load_all_meta(name)
        if articles is None:
            logger.error("Manifest for section '%s' could not be loaded", name)
            articles = []

        context["section_name"] = name
        context["section_title"] = section.get("title", name)
        context["navigation"] = build_navigation(articles)

        path = self.request.GET.get("path")
        if path:
            article = source.load_article(path)
            if article is None:
                raise Http404(f"Article '{path}' not found")
            meta = next((item for item in articles if item.path == path), None)
            context["article"] = article
            context["article_path"] = path
            context["page_title"] = meta.title if meta else article.meta.get("title") or context["section_title"]
        else:
            context["categories"] = group_by_category(articles)
            context["page_title"] = context["section_title"]

        return context
