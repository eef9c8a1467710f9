from django.contrib import admin
from .models import Category, PasswordEntry

@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "color", "owner")
    search_fields = ("name",)

@admin.register(PasswordEntry)
class PasswordEntryAdmin(admin.ModelAdmin):
    list_display = ("id", "title", "owner", "category", "length", "created_at", "updated_at")
    list_filter = ("include_uppercase", "include_lowercase", "include_digits", "include_symbols")
    search_fields = ("title",)
    # le jeton chiffré n'est ni affiché ni modifiable ici
    exclude = ("encrypted_secret",)
    readonly_fields = ("created_at", "updated_at")

    def has_add_permission(self, request):
        return False
