from __future__ import annotations

from decimal import Decimal

from django.core.management.base import BaseCommand

from modules.products.models import Product


class Command(BaseCommand):
    help = "Seed the products table with sample catalog data."

    catalog = [
        ("เสื้อยืดคอกลม", Decimal("199.00"), Decimal("10.00"), 128, "https://example.com/img/tshirt.jpg"),
        ("เสื้อเชิ้ตแขนยาว", Decimal("590.00"), Decimal("0.00"), 42, "https://example.com/img/shirt.jpg"),
        ("Denim Jacket", Decimal("1290.00"), Decimal("15.00"), 87, "https://example.com/img/jacket.jpg"),
        ("Running Shoes", Decimal("2490.00"), Decimal("20.00"), 311, "https://example.com/img/shoes.jpg"),
        ("Canvas Tote Bag", Decimal("250.00"), Decimal("0.00"), 19, "https://example.com/img/tote.jpg"),
        ("Wool Beanie", Decimal("350.00"), Decimal("5.00"), 7, "https://example.com/img/beanie.jpg"),
    ]

    def handle(self, *args, **options):
        self.stdout.write("Creating products...")
        created = 0
        for name, price, discount, review_count, image_url in self.catalog:
            _, was_created = Product.objects.get_or_create(
                name=name,
                defaults={
                    "price": price,
                    "discount": discount,
                    "review_count": review_count,
                    "image_url": image_url,
                },
            )
            created += int(was_created)
        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: products={len(self.catalog)}, created={created}"
            )
        )
