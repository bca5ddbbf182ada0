"""
Certificate frontend views.

Unlike the login/upload/profile pages, these are public and rendered on the
server: share links must work without a token and without JavaScript.
The explore page and the PDF widget answer htmx requests with fragments.
"""

from uuid import UUID

import structlog
from django.http import HttpResponse
from django.shortcuts import render
from django.views.decorators.cache import never_cache

from src.apps.certificates import previews
from src.apps.certificates import selectors as cert_selectors
from src.apps.certificates import services as cert_services
from src.common.exceptions import NotFoundError
from src.integrations.pdf_renderer import DocumentRenderError

logger = structlog.get_logger(__name__)


def explore_view(request):
    query = request.GET.get("q", "")
    certificates = cert_selectors.filter_certificates(
        cert_selectors.list_public_certificates(), query
    )
    context = {"certificates": certificates, "query": query, "active_page": "explore"}

    if request.htmx:
        return render(request, "frontend/partials/certificate_grid.html", context)
    return render(request, "frontend/explore.html", context)


@never_cache
def certificate_detail_view(request, cert_id: UUID):
    try:
        detail = cert_services.get_certificate_detail(cert_id=cert_id)
    except NotFoundError:
        return render(request, "frontend/certificate_not_found.html", status=404)

    return render(request, "frontend/certificate_detail.html", {"detail": detail})


@never_cache
def pdf_viewer_view(request, cert_id: UUID):
    try:
        viewer = previews.open_pdf_viewer(cert_id=cert_id, params=request.GET)
    except NotFoundError:
        return render(request, "frontend/certificate_not_found.html", status=404)

    return render(request, "frontend/partials/pdf_viewer.html", {"viewer": viewer})


@never_cache
def pdf_page_view(request, cert_id: UUID):
    try:
        png = previews.render_pdf_page(cert_id=cert_id, params=request.GET)
    except NotFoundError:
        return HttpResponse(status=404)
    except DocumentRenderError as exc:
        logger.warning("pdf_page_unavailable", cert_id=str(cert_id), error=str(exc))
        return HttpResponse(status=404)

    return HttpResponse(png, content_type="image/png")
