from django.core.management.base import BaseCommand
from django.contrib.auth import get_user_model
from django.db import transaction
from django.db.models import Q
from api.models import Category

DEMO_EMAIL = "demo@passforge.com"
DEMO_USERNAME = "demo"
DEMO_PASSWORD = "Demo123!"

DEFAULTS = [
    ("Redes Sociales", "Facebook, Instagram, Twitter, etc.", "#3b82f6"),
    ("Trabajo", "Cuentas de trabajo y profesionales", "#10b981"),
    ("Entretenimiento", "Netflix, Spotify, Steam, etc.", "#8b5cf6"),
]

class Command(BaseCommand):
    help = "Recrée l'utilisateur de démonstration et ses catégories d'exemple"

    @transaction.atomic
    def handle(self, *args, **opts):
        U = get_user_model()
        deleted, _ = U.objects.filter(Q(email=DEMO_EMAIL) | Q(username=DEMO_USERNAME)).delete()
        if deleted:
            self.stdout.write("[=] Ancien utilisateur démo supprimé")

        owner = U.objects.create_user(
            username=DEMO_USERNAME, email=DEMO_EMAIL, password=DEMO_PASSWORD,
            first_name="Usuario", last_name="Demo",
        )
        for name, desc, color in DEFAULTS:
            obj = Category.objects.create(owner=owner, name=name, description=desc, color=color)
            self.stdout.write(f"[OK] Créée  {obj.name}")
        self.stdout.write(f"Terminé. {DEMO_EMAIL} / {DEMO_PASSWORD}, {len(DEFAULTS)} catégories.")
