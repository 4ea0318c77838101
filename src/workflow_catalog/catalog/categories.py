"""Fixed category labels exposed by `/api/categories`."""

from __future__ import annotations

CATEGORIES: tuple[str, ...] = (
    "AI & Machine Learning",
    "Communication & Messaging",
    "Data Processing & Analysis",
    "Business Process Automation",
    "Cloud Storage & File Management",
    "CRM & Sales",
    "E-commerce & Retail",
    "Marketing & Advertising",
    "Project Management",
    "Social Media Management",
)
