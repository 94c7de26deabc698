"""Pydantic models for a site's CSS selector profile."""

from pydantic import BaseModel, Field


class SiteSelectors(BaseModel):
    """CSS selectors describing where each field lives on a site.

    Listing page selectors are applied to the whole page and must match once per
    article, in the same order. Author links are selected inside each byline,
    and body elements inside each body container.

    Attributes:
        headline: Headline element of each article on a listing page
        byline: Byline container of each article (one per article)
        byline_author: Author link inside one byline container
        date: Time-marker element of each article
        date_attribute: Attribute holding the machine-readable datetime
        link: Link element of each article
        link_attribute: Attribute holding the article URL
        body_container: Article body container on an article page
        body_elements: Paragraphs and subheadings inside the body container

    """

    headline: str = Field(default='article h2', description='Headline of each article')
    byline: str = Field(default='.byline', description='Byline container of each article')
    byline_author: str = Field(default='a', description='Author link inside a byline')
    date: str = Field(default='article time', description='Time-marker of each article')
    date_attribute: str = Field(default='datetime', description='Machine-readable datetime attribute')
    link: str = Field(default='article h2 a', description='Link to each article')
    link_attribute: str = Field(default='href', description='Attribute holding the article URL')
    body_container: str = Field(default='article', description='Body container on an article page')
    body_elements: str = Field(default='p, h2', description='Paragraphs and subheadings in the body')
