"""
Seed-скрипт: таблицы, админ из ENV и базовые категории
Запуск: python -m app.scripts.seed
"""
from sqlmodel import SQLModel, Session, select
from app.db.session import engine
from app.models import User, UserRole, Category
from app.core.security import hash_password
from app.core.config import settings

# Категории, на которые ссылаются ряды главной страницы
DEFAULT_CATEGORIES = [
    {"slug": "microsaas", "name": "Micro SaaS", "sort_order": 1},
    {"slug": "nocode", "name": "No-Code", "sort_order": 2},
]


def create_tables():
    """Создание всех таблиц"""
    SQLModel.metadata.create_all(engine)


def seed_admin(session: Session):
    """Создание админа если не существует"""
    admin_email = settings.ADMIN_EMAIL
    admin_password = settings.ADMIN_PASSWORD
    
    if not admin_email or not admin_password:
        print("ADMIN_EMAIL/ADMIN_PASSWORD not set, skipping admin seed")
        return
    
    existing = session.exec(select(User).where(User.email == admin_email)).first()
    if existing:
        print(f"Admin already exists: {existing.email}")
        return
    
    admin = User(
        email=admin_email,
        password_hash=hash_password(admin_password),
        name="Admin",
        role=UserRole.ADMIN,
        is_active=True
    )
    session.add(admin)
    session.commit()
    print(f"Admin created: {admin_email}")


def seed_categories(session: Session):
    """Базовые категории (по slug, без дублей)"""
    created = 0
    for data in DEFAULT_CATEGORIES:
        existing = session.exec(select(Category).where(Category.slug == data["slug"])).first()
        if existing:
            continue
        session.add(Category(**data))
        created += 1
    
    session.commit()
    print(f"Categories created: {created}")


def main():
    print("Creating tables...")
    create_tables()
    with Session(engine) as session:
        print("Seeding admin...")
        seed_admin(session)
        print("Seeding categories...")
        seed_categories(session)
    print("Done!")


if __name__ == "__main__":
    main()
