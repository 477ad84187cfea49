from django.http import HttpResponse
from django.shortcuts import render, get_object_or_404
from permalink.routing import bind_permalink
from .models import Page


def page_detail(request, slug):
    page = get_object_or_404(Page, slug=slug)
    bind_permalink(request, page)
    return render(request, 'testapp/page.html', {'page': page})


def about(request):
    return render(request, 'testapp/page.html')


def plain(request):
    return HttpResponse("No template here.")
