from typing import Dict

DEFAULT_LOCALE = "en"

_CATALOG: Dict[str, Dict[str, str]] = {
    "en": {
        "subject": "New inquiry: {title}",
        "title_label": "Title",
        "email_label": "Email",
        "content_label": "Content",
        "sent": "Email sent successfully",
        "failed": "Failed to send email",
        "invalid": "Please fill in the title, a valid email address and your message",
        "title_placeholder": "Enter a title",
        "email_placeholder": "Enter your email address",
        "content_placeholder": "Enter your message",
        "submit": "Send",
        "toast_sent_title": "Message sent",
        "toast_sent_body": "Thanks for reaching out. I'll get back to you soon.",
        "toast_error_title": "Error",
        "toast_error_body": "Your message could not be sent. Please try again later.",
    },
    "ja": {
        "subject": "新しいお問い合わせ: {title}",
        "title_label": "タイトル",
        "email_label": "メールアドレス",
        "content_label": "内容",
        "sent": "メールが正常に送信されました",
        "failed": "メールの送信に失敗しました",
        "invalid": "タイトル、有効なメールアドレス、内容を入力してください",
        "title_placeholder": "タイトルを入力してください",
        "email_placeholder": "メールアドレスを入力してください",
        "content_placeholder": "お問い合わせ内容を入力してください",
        "submit": "送信",
        "toast_sent_title": "メッセージ送信完了",
        "toast_sent_body": "お問い合わせありがとうございます。折り返しご連絡いたします。",
        "toast_error_title": "エラー",
        "toast_error_body": "メッセージの送信に失敗しました。後ほど再度お試しください。",
    },
}


def normalize_locale(locale: str | None) -> str:
    code = (locale or "").strip().lower().replace("_", "-").split("-", 1)[0]
    return code if code in _CATALOG else DEFAULT_LOCALE


def get_messages(locale: str | None) -> Dict[str, str]:
    return _CATALOG[normalize_locale(locale)]


PAGE_KEYS = (
    "title_label",
    "email_label",
    "content_label",
    "title_placeholder",
    "email_placeholder",
    "content_placeholder",
    "submit",
    "toast_sent_title",
    "toast_sent_body",
    "toast_error_title",
    "toast_error_body",
)


def get_page_text(locale: str | None) -> Dict[str, str]:
    """Strings the contact form shows to visitors."""
    text = get_messages(locale)
    return {key: text[key] for key in PAGE_KEYS}
