"""
Template tags for the pagination helpers.

Usage::

    {% load rail_paginator %}
    {% paginate page_obj theme="bootstrap" %}
    {% link_to_next_page page_obj "More" %}
    {% page_entries_info page_obj entry_name="member" %}

The request is read from the template context, so the
``django.template.context_processors.request`` context processor (or an
explicit ``request`` variable) is required for URL building.
"""

from django import template

from ..helpers import entries, links, paginator, urls

register = template.Library()


def _request(context):
    return context.get("request")


@register.simple_tag(takes_context=True)
def paginate(context, scope, **options):
    return paginator.paginate(_request(context), scope, **options)


@register.simple_tag(takes_context=True)
def link_to_next_page(context, scope, name, fallback="", **options):
    return links.link_to_next_page(_request(context), scope, name, fallback=fallback, **options)


@register.simple_tag(takes_context=True)
def link_to_previous_page(context, scope, name, fallback="", **options):
    return links.link_to_previous_page(_request(context), scope, name, fallback=fallback, **options)


@register.simple_tag(takes_context=True)
def rel_next_prev_link_tags(context, scope, **options):
    return links.rel_next_prev_link_tags(_request(context), scope, **options)


@register.simple_tag(takes_context=True)
def path_to_next_page(context, scope, **options):
    return urls.path_to_next_page(_request(context), scope, **options) or ""


@register.simple_tag(takes_context=True)
def path_to_prev_page(context, scope, **options):
    return urls.path_to_prev_page(_request(context), scope, **options) or ""


@register.simple_tag
def page_entries_info(scope, entry_name=None):
    return entries.page_entries_info(scope, entry_name=entry_name)
