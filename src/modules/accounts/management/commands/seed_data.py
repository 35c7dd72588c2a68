from __future__ import annotations

from datetime import timedelta

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.utils import timezone

from modules.accounts.constants import Role
from modules.accounts.repositories import UserDjangoRepository
from modules.audit.repositories import AuditDjangoRepository
from modules.dispatch.dtos import AssignOrdersDTO
from modules.dispatch.services import DispatchService
from modules.orders.dtos import CreateOrderDTO
from modules.orders.models import Order
from modules.orders.repositories import OrderDjangoRepository
from modules.orders.services import OrderService
from modules.stock.dtos import RegisterInboundDTO
from modules.stock.models import StockInbound
from modules.stock.repositories import StockDjangoRepository
from modules.stock.services import StockService

SEED_DRIVERS = [
    ("repartidor1", "repartidor123"),
    ("repartidor2", "repartidor123"),
]

SEED_ORDERS = [
    ("Av. San Martín 1200", "NORTE", "MAÑANA", 2),
    ("Belgrano 455", "NORTE", "TARDE", 1),
    ("Mitre 78", "CENTRO", "MAÑANA", 3),
    ("Rivadavia 3010", "CENTRO", "TARDE", 2),
    ("Sarmiento 940", "SUR", "MAÑANA", 1),
    ("Urquiza 15", "SUR", "TARDE", 4),
]


class Command(BaseCommand):
    help = "Seed database with development users, orders and stock."

    def handle(self, *args, **options):
        self.stdout.write("Seeding development data...")

        users_created, drivers = self._seed_users()
        orders_created = self._seed_orders(drivers)
        inbounds_created = self._seed_stock()

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"users={users_created}, "
                f"orders={orders_created}, "
                f"inbounds={inbounds_created}"
            )
        )

    def _seed_users(self):
        User = get_user_model()
        created = 0
        if not User.objects.filter(username="admin").exists():
            User.objects.create_superuser("admin", password="admin123")
            created += 1

        drivers = []
        for username, password in SEED_DRIVERS:
            driver = User.objects.filter(username=username).first()
            if driver is None:
                driver = User.objects.create_user(
                    username, password=password, role=Role.DRIVER
                )
                created += 1
            drivers.append(driver)
        return created, drivers

    def _seed_orders(self, drivers) -> int:
        if Order.objects.exists():
            self.stdout.write("Orders already present, skipping.")
            return 0

        self.stdout.write("Creating orders...")
        audit = AuditDjangoRepository()
        orders = OrderDjangoRepository()
        service = OrderService(order_repository=orders, audit_repository=audit)
        today = timezone.localdate()

        created = []
        for offset, (address, zone, slot, quantity) in enumerate(SEED_ORDERS):
            created.append(
                service.create_order(
                    CreateOrderDTO(
                        address=address,
                        zone=zone,
                        scheduled_date=today + timedelta(days=offset % 2),
                        time_slot=slot,
                        quantity=quantity,
                    )
                )
            )

        # First half goes to the first driver; the rest stays PENDING.
        dispatch = DispatchService(
            order_repository=orders,
            user_repository=UserDjangoRepository(),
            audit_repository=audit,
        )
        dispatch.assign_orders(
            AssignOrdersDTO(
                order_ids=[order.id for order in created[: len(created) // 2]],
                driver_id=drivers[0].id,
            )
        )
        self.stdout.write(self.style.SUCCESS("Creating orders... Done!"))
        return len(created)

    def _seed_stock(self) -> int:
        if StockInbound.objects.exists():
            return 0
        service = StockService(
            stock_repository=StockDjangoRepository(),
            audit_repository=AuditDjangoRepository(),
        )
        service.register_inbound(
            RegisterInboundDTO(
                inbound_date=timezone.localdate(),
                cantidad_llenas=100,
                notes="Carga inicial",
            )
        )
        return 1
