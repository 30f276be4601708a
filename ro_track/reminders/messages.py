"""Bilingual reminder templates and share links."""

import re
from urllib.parse import quote

from ro_track.models import ReminderType

MONTHS = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

MONTHS_HI = [
    "जनवरी", "फ़रवरी", "मार्च", "अप्रैल", "मई", "जून",
    "जुलाई", "अगस्त", "सितंबर", "अक्टूबर", "नवंबर", "दिसंबर",
]

OVERDUE_TEMPLATE = (
    "URGENT: Dear {name}, our records show an outstanding balance on your RO service account. "
    "Payments for the following months are overdue: {months}. The total amount due is ₹{total}. "
    "To avoid service interruption, please clear this balance immediately. "
    "Pay securely here: {link}. Thank you for your prompt attention."
)

OVERDUE_TEMPLATE_HI = (
    "अत्यावश्यक: प्रिय {name}, हमारे रिकॉर्ड आपके आरओ सेवा खाते पर एक बकाया राशि दिखा रहे हैं। "
    "निम्नलिखित महीनों के लिए भुगतान अतिदेय हैं: {months}। कुल देय राशि ₹{total} है। "
    "सेवा में रुकावट से बचने के लिए, कृपया इस शेष राशि का तुरंत भुगतान करें। "
    "यहां सुरक्षित रूप से भुगतान करें: {link}। आपके तत्काल ध्यान के लिए धन्यवाद।"
)

MONTHLY_TEMPLATE = (
    "Dear {name}, this is a friendly reminder for your RO service payment. "
    "The rent for {months}, amounting to ₹{total}, is now due. "
    "To ensure uninterrupted service, please complete the payment at your earliest convenience. "
    "Pay securely here: {link}. Thank you!"
)

MONTHLY_TEMPLATE_HI = (
    "प्रिय {name}, यह आपके आरओ सेवा भुगतान के लिए एक विनम्र अनुस्मारक है। "
    "{months} का किराया, ₹{total} की राशि, अब देय है। "
    "निर्बाध सेवा सुनिश्चित करने के लिए, कृपया जल्द से जल्द भुगतान पूरा करें। "
    "यहां सुरक्षित रूप से भुगतान करें: {link}। धन्यवाद!"
)

TEMPLATES = {
    ReminderType.OVERDUE: (OVERDUE_TEMPLATE, OVERDUE_TEMPLATE_HI),
    ReminderType.MONTHLY: (MONTHLY_TEMPLATE, MONTHLY_TEMPLATE_HI),
}


def format_months(months: list[tuple[int, int]], names: list[str] = MONTHS) -> str:
    """Render ``(year, month)`` pairs as ``"January 2024, February 2024"``."""
    return ", ".join(f"{names[month]} {year}" for year, month in months)


def render_messages(
    customer_name: str,
    months: list[tuple[int, int]],
    total_amount_due: int,
    payment_link: str,
    reminder_type: ReminderType,
) -> tuple[str, str]:
    """Render the English and Hindi reminder text.

    Returns
    -------
    tuple[str, str]
        ``(message, message_hi)``.
    """
    template, template_hi = TEMPLATES[reminder_type]
    message = template.format(
        name=customer_name,
        months=format_months(months, MONTHS),
        total=total_amount_due,
        link=payment_link,
    )
    message_hi = template_hi.format(
        name=customer_name,
        months=format_months(months, MONTHS_HI),
        total=total_amount_due,
        link=payment_link,
    )
    return message, message_hi


def _digits(mobile: str) -> str:
    return re.sub(r"[^0-9]", "", mobile)


def whatsapp_url(mobile: str, message: str) -> str:
    """wa.me link; bare 10-digit Indian numbers get the 91 country code."""
    number = _digits(mobile)
    if len(number) == 10:
        number = f"91{number}"
    return f"https://wa.me/{number}?text={quote(message, safe='')}"


def sms_url(mobile: str, message: str) -> str:
    """sms: URI with the message body prefilled."""
    return f"sms:{_digits(mobile)}?body={quote(message, safe='')}"
