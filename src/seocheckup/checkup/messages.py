"""
Display strings for report values and notices.

Row labels stay in English in every locale; only values and notices are
translated.
"""

from __future__ import annotations

from typing import Dict

DEFAULT_LOCALE = "en"

MESSAGES: Dict[str, Dict[str, str]] = {
    "en": {
        "yes": "Yes",
        "no": "No",
        "missing": "missing",
        "robots_unverified": "Maybe (could not be verified)",
        "load_good": "Good",
        "load_medium": "Medium",
        "load_slow": "Slow",
        "load_excellent": "Excellent",
        "h1_tag_one": "tag",
        "h1_tag_other": "tags",
        "h1_ideal": "Ideal",
        "h1_none": "None found",
        "h1_too_many": "Too many",
        "images_alt": "{with_alt}/{total} have alt text",
        "images_none": "No images",
        "tags": "{count} tags",
        "none": "None",
        "links": "{count} links",
        "preview_title": "{hostname} - The Best SEO Platform for Professional Website Analysis",
        "preview_description": (
            "Complete SEO analysis for your website. Check meta tags, heading structure, image "
            "optimization and 15+ other key SEO factors to improve your Google ranking."
        ),
        "notice_done_title": "Analysis complete",
        "notice_done": "SEO score: {percentage}% ({passed}/{total})",
        "notice_preview_title": "Preview data shown",
        "notice_preview": "This is a sample SEO analysis built from demonstration data",
        "notice_invalid_title": "Error",
        "notice_invalid": "Please enter a website URL",
        "notice_unreachable_title": "Cannot access website",
        "notice_unreachable": "The website may block bots, or there is a CORS problem. Try another website!",
    },
    "id": {
        "yes": "Ya",
        "no": "Tidak",
        "missing": "missing",
        "robots_unverified": "Mungkin (tidak dapat diverifikasi)",
        "load_good": "Baik",
        "load_medium": "Sedang",
        "load_slow": "Lambat",
        "load_excellent": "Sangat Baik",
        "h1_tag_one": "tag",
        "h1_tag_other": "tag",
        "h1_ideal": "Ideal",
        "h1_none": "Tidak ada",
        "h1_too_many": "Terlalu banyak",
        "images_alt": "{with_alt}/{total} memiliki alt text",
        "images_none": "Tidak ada gambar",
        "tags": "{count} tags",
        "none": "Tidak ada",
        "links": "{count} links",
        "preview_title": "{hostname} - Platform SEO Terbaik untuk Analisis Website Professional",
        "preview_description": (
            "Analisis SEO lengkap untuk website Anda. Periksa meta tags, struktur heading, optimasi "
            "gambar, dan 15+ faktor SEO penting lainnya untuk meningkatkan ranking di Google."
        ),
        "notice_done_title": "Analisis Selesai",
        "notice_done": "Skor SEO: {percentage}% ({passed}/{total})",
        "notice_preview_title": "Preview Data Ditampilkan",
        "notice_preview": "Ini adalah contoh hasil analisis SEO dengan data dummy untuk demonstrasi",
        "notice_invalid_title": "Error",
        "notice_invalid": "Silakan masukkan URL website",
        "notice_unreachable_title": "Tidak dapat mengakses website",
        "notice_unreachable": "Website mungkin memblokir bot, atau ada masalah CORS. Coba website lain!",
    },
}


def message(key: str, locale: str = DEFAULT_LOCALE, **kwargs: object) -> str:
    """Look up ``key`` for ``locale``, falling back to English, and format it."""
    catalog = MESSAGES.get(locale, MESSAGES[DEFAULT_LOCALE])
    template = catalog.get(key, MESSAGES[DEFAULT_LOCALE][key])
    return template.format(**kwargs) if kwargs else template
