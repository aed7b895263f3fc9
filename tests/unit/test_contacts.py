"""
Unit tests for the contact extractor.
"""
from mail_extraction.extraction.contacts import extract_contacts
from mail_extraction.models.parsed_content import ContactKind


def _of(contacts, kind):
    return [c for c in contacts if c.kind == kind]


class TestPhones:
    def test_phone_with_extension(self):
        contacts = extract_contacts("Call (305) 555-1234 ext. 22")
        phones = _of(contacts, ContactKind.PHONE)
        assert len(phones) == 1
        assert phones[0].value == "(305) 555-1234 ext. 22"
        assert phones[0].label == "ext. 22"

    def test_phone_formats(self):
        text = "Office 305-555-1234, cell 305.555.9876, toll free +1 800 555 0000"
        phones = _of(extract_contacts(text), ContactKind.PHONE)
        assert [p.value for p in phones] == ["305-555-1234", "305.555.9876", "+1 800 555 0000"]
        assert all(p.label is None for p in phones)

    def test_long_digit_runs_are_not_phones(self):
        phones = _of(extract_contacts("Ticket 1762345678901 issued"), ContactKind.PHONE)
        assert phones == []

    def test_all_matches_returned_without_dedup(self):
        phones = _of(extract_contacts("305-555-1234 or 305-555-1234"), ContactKind.PHONE)
        assert len(phones) == 2


class TestEmailsAndWebsites:
    def test_email(self):
        emails = _of(extract_contacts("Write to anna.lopez@travel.example.com today"), ContactKind.EMAIL)
        assert [e.value for e in emails] == ["anna.lopez@travel.example.com"]

    def test_email_host_not_reported_as_website(self):
        websites = _of(extract_contacts("Write to anna@example.com"), ContactKind.WEBSITE)
        assert websites == []

    def test_websites(self):
        text = "Visit www.luxurytravel.com or https://booking.example.org for details"
        websites = _of(extract_contacts(text), ContactKind.WEBSITE)
        assert [w.value for w in websites] == ["www.luxurytravel.com", "https://booking.example.org"]

    def test_order_phones_emails_websites(self):
        text = "site.com john@site.com 305-555-1234"
        kinds = [c.kind for c in extract_contacts(text)]
        assert kinds == [ContactKind.PHONE, ContactKind.EMAIL, ContactKind.WEBSITE]

    def test_no_contacts(self):
        assert extract_contacts("Nothing to see here") == []

    def test_website_with_many_host_labels(self):
        websites = _of(extract_contacts("Visit https://mail.travel.example.com today"), ContactKind.WEBSITE)
        assert [w.value for w in websites] == ["https://mail.travel.example.com"]
