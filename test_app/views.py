from django.shortcuts import render

from rail_paginator.core import paginate_request

from .models import Address, User


def user_index(request):
    users = paginate_request(request, User.objects.all(), request.GET.get("per"))
    return render(request, "users/index.html", {"users": users})


def address_index(request, user_id):
    addresses = paginate_request(
        request, Address.objects.filter(user_id=user_id), request.GET.get("per")
    )
    return render(request, "addresses/index.html", {"addresses": addresses, "user_id": user_id})
