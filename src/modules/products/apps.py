from django.apps import AppConfig


class ProductsConfig(AppConfig):
    default_auto_field = "django.db.models.AutoField"
    name = "modules.products"
    label = "products"

    def ready(self) -> None:
        from django.db.models.signals import post_migrate

        from modules.products.signals import seed_after_migrate

        post_migrate.connect(seed_after_migrate, sender=self)
