import argparse
import logging

from core.db import Base, engine, SessionLocal
from core.business_hours import DEFAULT_SCHEDULE, display_hours
from core.config import BUSINESS_ADDRESS, BUSINESS_EMAIL, BUSINESS_PHONE, SUPER_ADMIN_EMAIL, SUPER_ADMIN_PASSWORD
from core.logger import setup_logging
from models.menu_item import MenuItem
from models.gallery_image import GalleryImage
from models.reservation import Reservation
from models.contact_message import ContactMessage
from models.about_content import AboutContent
from models.setting import Setting
from models.admin import Admin
from models.audit_log import AuditLog
from core.admin_service import create_super_admin
from core.content_service import AboutRepository, HeroBannerRepository, SettingsRepository

logger = logging.getLogger("init_db")

UNSPLASH = "https://images.unsplash.com/photo-{}?w=600&q=75&auto=format&fit=crop"

SAMPLE_MENU = [
    ("Jollof Rice", "Aromatic rice cooked in a rich tomato sauce with spices, served with grilled chicken and fried plantains.", "15.00", "Entrees", "1604329760661-e71dc83f8f26", "", True),
    ("Kelewele", "Spicy fried plantain cubes seasoned with ginger, pepper, and aromatic spices.", "8.00", "Appetizers", "1606923829579-0cb981a83e2e", "Vegan,Gluten-Free", True),
    ("Banku with Tilapia", "Fermented corn and cassava dough served with grilled tilapia and spicy pepper sauce.", "18.00", "Entrees", "1519708227418-c8fd9a32b7a2", "", True),
    ("Bofrot", "Sweet fried dough balls, crispy on the outside and soft inside.", "6.00", "Desserts", "1626094309830-abbb0c99da4a", "Vegetarian", False),
    ("Sobolo", "Refreshing hibiscus drink infused with ginger, pineapple, and cloves. Served chilled.", "5.00", "Beverages", "1556679343-c7306c1976bc", "Vegan,Gluten-Free", False),
    ("Waakye", "Rice and beans cooked with millet leaves, served with spaghetti, gari, boiled egg, and shito.", "12.00", "Entrees", "1585032226651-759b368d7246", "Vegetarian", False),
    ("Red Red", "Black-eyed peas stewed in palm oil with tomatoes and spices, served with fried plantains.", "10.00", "Entrees", "1596797038530-2c107229654b", "Vegan", False),
    ("Groundnut Soup", "Rich peanut-based soup with chicken, vegetables, and traditional spices. Served with fufu.", "16.00", "Entrees", "1547592166-23ac45744acd", "", False),
    ("Fried Yam with Shito", "Crispy golden fried yam served with spicy black pepper sauce (shito).", "7.00", "Appetizers", "1623428187969-5da2dcea5ebf", "Vegan", False),
    ("Chin Chin", "Crunchy fried dough snacks with a hint of nutmeg.", "5.00", "Desserts", "1599599810769-bcde5a160d32", "Vegetarian", False),
]


def seed_menu_items(db):
    if db.query(MenuItem).first():
        logger.info("Menu items already seeded.")
        return
    db.add_all([
        MenuItem(name=name, description=desc, price=price, category=category,
                 image_url=UNSPLASH.format(photo), badges=badges, featured=featured, status="active")
        for name, desc, price, category, photo, badges, featured in SAMPLE_MENU
    ])
    db.commit()
    logger.info("Sample menu items seeded.")


def seed_content(session_factory=SessionLocal):
    about = AboutRepository(session_factory)
    if not about.get():
        about.update({
            "content": "Founded in the heart of Sunyani, Ernemako Restaurant began with a simple mission: "
                       "to serve authentic, soul-warming Ghanaian dishes in a modern, welcoming environment.",
            "years_experience": 10,
            "menu_items_count": 50,
        })
        logger.info("Default about content created.")

    settings = SettingsRepository(session_factory)
    if not settings.get():
        settings.update({
            "phone": BUSINESS_PHONE,
            "email": BUSINESS_EMAIL,
            "address": BUSINESS_ADDRESS,
            "business_hours": display_hours(DEFAULT_SCHEDULE),
        })
        logger.info("Default settings created.")

    hero = HeroBannerRepository(session_factory)
    if not hero.get():
        hero.update({
            "image_url": UNSPLASH.format("1504674900247-0877df9cc836"),
            "title": "Authentic Ghanaian Cuisine",
            "subtitle": "Soul-warming dishes in the heart of Sunyani",
        })


def init_db(reset: bool = False):
    if reset:
        logger.info("Rebuilding database (drop/create)...")
        Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    logger.info("Tables ready: %s", ", ".join(sorted(Base.metadata.tables)))

    db = SessionLocal()
    try:
        seed_menu_items(db)
    finally:
        db.close()

    seed_content()
    create_super_admin(SessionLocal, SUPER_ADMIN_EMAIL, SUPER_ADMIN_PASSWORD)

    logger.info("Database initialization complete!")
    logger.info("Super admin: %s", SUPER_ADMIN_EMAIL)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create and seed the restaurant database")
    parser.add_argument("--reset", action="store_true", help="drop all tables first")
    args = parser.parse_args()
    setup_logging()
    init_db(reset=args.reset)
