from django.urls import path

from . import views

urlpatterns = [
    path("users/", views.user_index, name="users-index"),
    path("users/<int:user_id>/addresses/", views.address_index, name="user-addresses"),
]
