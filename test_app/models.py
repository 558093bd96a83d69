from django.db import models


class User(models.Model):
    name = models.CharField(max_length=100)

    class Meta:
        app_label = "test_app"
        ordering = ["id"]
        verbose_name = "user"
        verbose_name_plural = "users"


class Address(models.Model):
    """Address of a user, named with an irregular plural."""

    user = models.ForeignKey(
        User, on_delete=models.CASCADE, related_name="addresses", null=True, blank=True
    )
    street = models.CharField(max_length=200, blank=True)

    class Meta:
        app_label = "test_app"
        ordering = ["id"]
        verbose_name = "address"
        verbose_name_plural = "addresses"
