"""Module: seed_data.

Fill a development database with directory entries, a sample
advertisement and an administrator account:

    python -m petcare.scripts.seed_data --admin-mobile 0500000000 --admin-password secret123
"""

import argparse
import logging
import random
import string
from datetime import timedelta

from faker import Faker
from sqlalchemy import func, select

from petcare.core.config import settings
from petcare.core.logging_config import setup_logging
from petcare.core.security import hash_password
from petcare.core.timeutils import utcnow
from petcare.db.init_db import init_db
from petcare.db.models.advertisement import Advertisement
from petcare.db.models.charity import Charity
from petcare.db.models.pet_store import PetStore
from petcare.db.models.user import ROLE_ADMIN, User
from petcare.db.models.veterinary import Veterinary
from petcare.db.session import SessionLocal

logger = logging.getLogger(__name__)

fake = Faker()

VET_SPECIALTIES = ["General practice", "Surgery", "Dermatology", "Dentistry", "Exotic animals", "Emergency care"]
CITIES = ["Riyadh", "Jeddah", "Dammam", "Mecca", "Medina", "Khobar"]


# Shared helpers used by multiple seed builders.
def generate_mobile() -> str:
    return "05" + "".join(random.choice(string.digits) for _ in range(8))


def _directory_fields() -> dict:
    city = random.choice(CITIES)
    return {
        "mobile": generate_mobile(),
        "address": fake.street_address(),
        "location": city,
    }


def seed_admin(db, mobile: str, password: str) -> User:
    user = db.execute(select(User).where(User.mobile == mobile)).scalar_one_or_none()
    if user is None:
        user = User(
            name="Administrator",
            mobile=mobile,
            password=hash_password(password),
            is_verified=True,
            role=ROLE_ADMIN,
        )
        db.add(user)
        logger.info("Created admin account %s", mobile)
    else:
        user.role = ROLE_ADMIN
        logger.info("Promoted existing account %s to admin", mobile)
    return user


def seed_directories(db, count: int) -> None:
    if db.execute(select(func.count(Veterinary.id))).scalar_one() == 0:
        for _ in range(count):
            db.add(
                Veterinary(
                    name=f"Dr. {fake.last_name()} Veterinary Clinic",
                    specialty=random.choice(VET_SPECIALTIES),
                    **_directory_fields(),
                )
            )
    if db.execute(select(func.count(PetStore.id))).scalar_one() == 0:
        for _ in range(count):
            db.add(PetStore(name=f"{fake.company()} Pet Supplies", **_directory_fields()))
    if db.execute(select(func.count(Charity.id))).scalar_one() == 0:
        for _ in range(count):
            db.add(Charity(name=f"{fake.last_name()} Animal Rescue", **_directory_fields()))


def seed_advertisement(db) -> None:
    if db.execute(select(func.count(Advertisement.id))).scalar_one() > 0:
        return
    now = utcnow()
    db.add(
        Advertisement(
            image="/uploads/advertisements/sample.jpg",
            link=fake.url(),
            start_date=now,
            end_date=now + timedelta(days=30),
            priority=1,
            is_active=True,
        )
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the pet care database with demo data.")
    parser.add_argument("--admin-mobile", default="0500000000")
    parser.add_argument("--admin-password", default="admin123")
    parser.add_argument("--count", type=int, default=5, help="entries per directory")
    args = parser.parse_args()

    setup_logging(settings.log_level)
    init_db()

    db = SessionLocal()
    try:
        seed_admin(db, args.admin_mobile, args.admin_password)
        seed_directories(db, args.count)
        seed_advertisement(db)
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
    logger.info("Seed complete")


if __name__ == "__main__":
    main()
