from django.conf import settings
from django.core.validators import MinValueValidator, RegexValidator
from django.db import models

DEFAULT_COLOR = "#3b82f6"

hex_color = RegexValidator(r"^#[0-9a-fA-F]{6}$", "Color must be a #rrggbb hex value.")

class Category(models.Model):
    owner = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="categories")
    name = models.CharField(max_length=100)
    description = models.TextField(blank=True, default="")
    color = models.CharField(max_length=7, default=DEFAULT_COLOR, validators=[hex_color])
    created_at = models.DateTimeField(auto_now_add=True)
    class Meta:
        unique_together = ("owner","name")
        ordering = ["name"]
        verbose_name_plural = "categories"
    def __str__(self): return self.name

class PasswordEntry(models.Model):
    owner = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="passwords")
    title = models.CharField(max_length=200)
    category = models.ForeignKey(Category, on_delete=models.SET_NULL, null=True, blank=True, related_name="passwords")
    encrypted_secret = models.TextField()  # jeton api.cipher, jamais le clair
    length = models.PositiveSmallIntegerField(validators=[MinValueValidator(1)])
    include_uppercase = models.BooleanField(default=False)
    include_lowercase = models.BooleanField(default=False)
    include_digits = models.BooleanField(default=False)
    include_symbols = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    class Meta:
        ordering = ["-created_at","-id"]
        verbose_name_plural = "password entries"
    def __str__(self): return self.title
