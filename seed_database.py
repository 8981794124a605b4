#!/usr/bin/env python3
"""
Script to seed the database with placeholder data for local development.
Run with: python3 seed_database.py
"""

from datetime import date

from app.core.config import settings
from app.core.database import Store
from app.models import Customer, Invoice, Revenue, User
from app.services.auth_service import hash_password

USERS = [
    {
        "id": "410544b2-4001-4271-9855-fec4b6a6442a",
        "name": "User",
        "email": "user@nextmail.com",
        "password": "123456",
    },
]

CUSTOMERS = [
    {"id": "d6e15727-9fe1-4961-8c5b-ea44a9bd81aa", "name": "Evil Rabbit", "email": "evil@rabbit.com", "image_url": "/customers/evil-rabbit.png"},
    {"id": "3958dc9e-712f-4377-85e9-fec4b6a6442a", "name": "Delba de Oliveira", "email": "delba@oliveira.com", "image_url": "/customers/delba-de-oliveira.png"},
    {"id": "3958dc9e-742f-4377-85e9-fec4b6a6442a", "name": "Lee Robinson", "email": "lee@robinson.com", "image_url": "/customers/lee-robinson.png"},
    {"id": "76d65c26-f784-44a2-ac19-586678f7c2f2", "name": "Michael Novotny", "email": "michael@novotny.com", "image_url": "/customers/michael-novotny.png"},
    {"id": "cc27c14a-0acf-4f4a-a6c9-d45682c144b9", "name": "Amy Burns", "email": "amy@burns.com", "image_url": "/customers/amy-burns.png"},
    {"id": "13d07535-c59e-4157-a011-f8d2ef4e0cbb", "name": "Balazs Orban", "email": "balazs@orban.com", "image_url": "/customers/balazs-orban.png"},
]

# (customer index, amount in cents, status, date)
INVOICES = [
    (0, 15795, "pending", date(2022, 12, 6)),
    (1, 20348, "pending", date(2022, 11, 14)),
    (4, 3040, "paid", date(2022, 10, 29)),
    (3, 44800, "paid", date(2023, 9, 10)),
    (5, 34577, "pending", date(2023, 8, 5)),
    (2, 54246, "pending", date(2023, 7, 16)),
    (0, 666, "pending", date(2023, 6, 27)),
    (3, 32545, "paid", date(2023, 6, 9)),
    (4, 1250, "paid", date(2023, 6, 17)),
    (5, 8546, "paid", date(2023, 6, 7)),
    (1, 500, "paid", date(2023, 8, 19)),
    (5, 8945, "paid", date(2023, 6, 3)),
    (2, 1000, "paid", date(2022, 6, 5)),
]

REVENUE = [
    ("Jan", 2000), ("Feb", 1800), ("Mar", 2200), ("Apr", 2500),
    ("May", 2300), ("Jun", 3200), ("Jul", 3500), ("Aug", 3700),
    ("Sep", 2500), ("Oct", 2800), ("Nov", 3000), ("Dec", 4800),
]


def clear_database(store: Store):
    """Clear existing data from all tables"""
    print("Clearing existing data...")
    with store.session() as db:
        db.query(Invoice).delete()
        db.query(Customer).delete()
        db.query(Revenue).delete()
        db.query(User).delete()
        db.commit()
    print("Database cleared.")


def seed_users(store: Store):
    print("Seeding users...")
    with store.session() as db:
        db.add_all([
            User(id=user["id"], name=user["name"], email=user["email"], password=hash_password(user["password"]))
            for user in USERS
        ])
        db.commit()
    print(f"Seeded {len(USERS)} users.")


def seed_customers(store: Store):
    print("Seeding customers...")
    with store.session() as db:
        db.add_all([Customer(**customer) for customer in CUSTOMERS])
        db.commit()
    print(f"Seeded {len(CUSTOMERS)} customers.")


def seed_invoices(store: Store):
    print("Seeding invoices...")
    with store.session() as db:
        db.add_all([
            Invoice(customer_id=CUSTOMERS[index]["id"], amount=amount, status=status, date=day)
            for index, amount, status, day in INVOICES
        ])
        db.commit()
    print(f"Seeded {len(INVOICES)} invoices.")


def seed_revenue(store: Store):
    print("Seeding revenue...")
    with store.session() as db:
        db.add_all([Revenue(month=month, revenue=revenue) for month, revenue in REVENUE])
        db.commit()
    print(f"Seeded {len(REVENUE)} revenue rows.")


def main():
    store = Store(settings.database_url, echo=settings.SQL_ECHO)
    try:
        store.create_all()
        clear_database(store)
        seed_users(store)
        seed_customers(store)
        seed_invoices(store)
        seed_revenue(store)
        print("\nDatabase seeding completed successfully!")
    except Exception as e:
        print(f"Error seeding database: {e}")
        raise
    finally:
        store.dispose()


if __name__ == "__main__":
    main()
