# core/config.py
import os
from decimal import Decimal
from dotenv import load_dotenv

load_dotenv()

APP_NAME = os.getenv("APP_NAME", "Ernemako Restaurant")
BUSINESS_EMAIL = os.getenv("BUSINESS_EMAIL", "hello@ernemakorestaurant.com")
BUSINESS_PHONE = os.getenv("BUSINESS_PHONE", "+233 123 456 789")
BUSINESS_ADDRESS = os.getenv("BUSINESS_ADDRESS", "Opposite Fiapre Park, Sunyani, Bono Region, Ghana")
CURRENCY = os.getenv("CURRENCY", "GH₵")

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///ernemako.db")

# Hosted backend (storage bucket + auth)
SUPABASE_URL = os.getenv("SUPABASE_URL")
SUPABASE_KEY = os.getenv("SUPABASE_KEY")
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "local")  # local | supabase
STORAGE_BUCKET = os.getenv("STORAGE_BUCKET", "restaurant-images")
UPLOAD_DIR = os.getenv("UPLOAD_DIR", "assets/uploads")
AUTH_BACKEND = os.getenv("AUTH_BACKEND", "local")  # local | supabase

# Mail relay
RELAY_URL = os.getenv("RELAY_URL", "http://localhost:8000")
RELAY_TIMEOUT = float(os.getenv("RELAY_TIMEOUT", "15"))
RESEND_API_KEY = os.getenv("RESEND_API_KEY")
RESEND_API_URL = os.getenv("RESEND_API_URL", "https://api.resend.com/emails")
MAIL_FROM = os.getenv("MAIL_FROM", f"{APP_NAME} <onboarding@resend.dev>")

SUPER_ADMIN_EMAIL = os.getenv("SUPER_ADMIN_EMAIL", "admin@ernemako.com")
SUPER_ADMIN_PASSWORD = os.getenv("SUPER_ADMIN_PASSWORD", "admin123")

# Business hours, days numbered 0=Sunday..6=Saturday
OPEN_HOUR = int(os.getenv("OPEN_HOUR", "8"))
CLOSE_HOUR = int(os.getenv("CLOSE_HOUR", "22"))
CLOSED_DAYS = [int(d) for d in os.getenv("CLOSED_DAYS", "0").split(",") if d.strip()]

TAX_RATE = Decimal(os.getenv("TAX_RATE", "0.10"))

SESSION_TIMEOUT = int(os.getenv("SESSION_TIMEOUT", "3600"))
SESSION_CHECK_INTERVAL = int(os.getenv("SESSION_CHECK_INTERVAL", "10"))
NOTIFICATION_POLL_SECONDS = int(os.getenv("NOTIFICATION_POLL_SECONDS", "30"))
HOURS_POLL_SECONDS = int(os.getenv("HOURS_POLL_SECONDS", "60"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_DIR = os.getenv("LOG_DIR", "logs")
