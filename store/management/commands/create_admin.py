# store/management/commands/create_admin.py — cria ou promove o admin padrão (DEFAULT_ADMIN_*)
import logging

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from store.models import User

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Cria (ou promove para ADMIN) o usuário administrador padrão."

    def add_arguments(self, parser):
        parser.add_argument("--email", default=settings.DEFAULT_ADMIN_EMAIL)
        parser.add_argument("--name", default=settings.DEFAULT_ADMIN_NAME)
        parser.add_argument("--password", default=settings.DEFAULT_ADMIN_PASSWORD)

    def handle(self, *args, **options):
        email = (options["email"] or "").strip().lower()
        if not email:
            raise CommandError("Informe --email ou DEFAULT_ADMIN_EMAIL.")

        user = User.objects.filter(email=email).first()
        if user is None:
            password = options["password"]
            if len(password or "") < 6:
                raise CommandError("Senha do admin ausente ou com menos de 6 caracteres.")
            user = User(name=options["name"], email=email, role=User.ROLE_ADMIN)
            user.set_password(password)
            user.save()
            logger.info(f"Admin {email} criado")
            self.stdout.write(self.style.SUCCESS(f"Admin {email} criado."))
            return

        if user.role != User.ROLE_ADMIN:
            user.role = User.ROLE_ADMIN
            user.save(update_fields=["role", "updated_at"])
            self.stdout.write(self.style.SUCCESS(f"{email} promovido para ADMIN."))
        else:
            self.stdout.write(f"{email} já é ADMIN.")
