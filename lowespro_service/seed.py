import argparse
import logging
import random

from faker import Faker
from sqlalchemy.orm import Session

from shared.core.database import Base, SessionLocal, engine
from lowespro_service.app.crud.procurement import vendors_crud
from lowespro_service.app.enum.catalog_enum import BrandIndustry
from lowespro_service.app.enum.customers_enum import DefaultTrade
from lowespro_service.app.models.customers.trades import Trade
from lowespro_service.app.models.procurement.representatives import Representative
from lowespro_service.app.schemas.procurement.vendors_schemas import VendorCreate

logger = logging.getLogger(__name__)

fake = Faker()

DEMO_CATEGORIES = ["Lumber", "Roofing", "Electrical", "Plumbing", "Concrete", "Decking", "Hardware"]
DEMO_SERVICES = ["Delivery", "Installation", "Special Order", "Job Site Drop"]


def seed_default_trades(db: Session) -> int:
    existing = {name for (name,) in db.query(Trade.name).all()}
    added = 0
    for trade in DefaultTrade:
        if trade.value not in existing:
            db.add(Trade(name=trade.value, is_default=True))
            added += 1
    db.commit()
    return added


def seed_demo_vendors(db: Session, count: int = 5):
    for _ in range(count):
        vendor = vendors_crud.create_vendor(db, VendorCreate(
            company_name=fake.company(),
            phone=fake.numerify("(###) ###-####"),
            email=fake.company_email(),
            website=fake.url(),
            address=fake.address().replace("\n", ", "),
            categories=random.sample(DEMO_CATEGORIES, k=2),
            services=random.sample(DEMO_SERVICES, k=1),
            notes=f"Industry focus: {random.choice(list(BrandIndustry)).value}",
        ))
        for _ in range(random.randint(1, 3)):
            db.add(Representative(
                vendor_id=vendor.id,
                vendor_name=vendor.company_name,
                name=fake.name(),
                position=random.choice(["Sales Rep", "Account Manager", "Territory Manager"]),
                cell_phone=fake.numerify("(###) ###-####"),
                email=fake.email(),
            ))
        db.commit()


def seed_data(demo: bool = False):
    Base.metadata.create_all(bind=engine)
    db: Session = SessionLocal()
    try:
        added = seed_default_trades(db)
        logger.info("Seeded %s default trades", added)
        if demo:
            seed_demo_vendors(db)
            logger.info("Seeded demo vendors and representatives")
    except Exception:
        db.rollback()
        logger.exception("Error seeding data")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    parser = argparse.ArgumentParser(description="Seed the LowesPro database")
    parser.add_argument("--demo", action="store_true", help="also add Faker-generated vendors")
    seed_data(demo=parser.parse_args().demo)
