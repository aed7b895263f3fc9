"""
Shared test fixtures for the extraction engine test suite.
"""
import pytest


# ==========================================================================
# Raw bodies
# ==========================================================================

@pytest.fixture
def agent_html_email():
    """Machine-generated agent e-mail: booking, prices, logo and signature."""
    return (
        "<html><head><title>Booking</title>"
        "<style>p { color: red; }</style></head>\n"
        "<body>\n"
        "<p>Hi Maria,</p>\n"
        "<p>Your trip is confirmed.</p>\n"
        "<p>Flight EK 203 JFK-DXB on 15MAR. <b>PNR: LNEKP2</b></p>\n"
        "<p>Net Price: $1,234.56 USD<br>Service Fee: $50<br>Clean Profit: $180.00</p>\n"
        '<img src="cid:logo123" alt="Company logo">\n'
        "<p>Best regards,<br>John Smith<br>Sr. Travel Expert<br>"
        "Luxury Travel Group, Inc.<br>(305) 555-1234<br>"
        "john@luxurytravel.com<br>www.luxurytravel.com</p>\n"
        "</body></html>"
    )


@pytest.fixture
def plain_paragraph():
    """Prose with nothing to extract."""
    return (
        "Hello there, I hope your week is going well and that the weather "
        "has been kind to you so far. Let me know when you have some time "
        "to talk about the summer plans"
    )


@pytest.fixture
def signature_text():
    return "\n".join(
        [
            "Please find the itinerary attached.",
            "",
            "Best regards,",
            "John Smith",
            "Sr. Travel Expert",
            "Luxury Travel Group, Inc.",
            "Phone: (305) 555-1234",
            "Mobile: 305.555.9876",
            "john@luxurytravel.com",
            "www.luxurytravel.com",
            "1200 Ocean Drive, Miami Beach, FL",
        ]
    )


@pytest.fixture
def segment_line():
    return "1EK203JFKDXB15MAR08451905N(Y)"


@pytest.fixture
def nested_quote_text():
    return "\n".join(
        [
            "Sounds good, see you then.",
            "",
            "On Mon, Mar 3, 2025 at 9:14 AM, Jane Doe <jane@example.com> wrote:",
            "> Can we move the call?",
            ">> Original proposal was Tuesday.",
            ">>> Initial request from the client.",
        ]
    )
