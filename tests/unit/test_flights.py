"""
Unit tests for the flight / booking extractor.
"""
from mail_extraction.extraction.flights import (
    decode_segment,
    extract_booking_references,
    extract_flights,
)
from mail_extraction.models.parsed_content import FlightItem


class TestDecodeSegment:
    def test_full_decode(self, segment_line):
        item = decode_segment(segment_line)
        assert item == FlightItem(
            flight_number="EK203",
            airline="EK",
            route="JFK-DXB",
            departure="JFK",
            arrival="DXB",
            departure_time="0845",
            arrival_time="1905",
            day_offset="N",
            seat_count=1,
            date="15MAR",
            service_class="Y",
        )

    def test_three_letter_airline_and_seat_count(self):
        item = decode_segment("2AAL1234MIAJFK02APR11301445P(J)")
        assert item is not None
        assert item.seat_count == 2
        assert item.route == "MIA-JFK"
        assert item.service_class == "J"
        assert item.flight_number.endswith("1234")

    def test_shape_mismatch_is_skipped(self):
        assert decode_segment("1EK203JFKDXB15MAR0845N(Y)") is None
        assert decode_segment("1EK203JFKDXB15MAR08451905N") is None
        assert decode_segment("Flight EK 203 JFK-DXB") is None


class TestExtractFlights:
    def test_token_and_route_merge(self):
        items = extract_flights("Flight EK 203 JFK-DXB on 15MAR")
        assert items == [FlightItem(flight_number="EK203", airline="EK", route="JFK-DXB")]

    def test_route_attaches_to_most_recent_item(self):
        items = extract_flights("AA 100 and BA 200 via MIA LHR")
        assert items[0].route is None
        assert items[1].route == "MIA-LHR"

    def test_route_only_item_when_no_flight(self):
        items = extract_flights("Routing: MIAJFK")
        assert items == [FlightItem(route="MIA-JFK")]

    def test_second_route_opens_new_item(self):
        items = extract_flights("UA 55 SFO-ORD then ORD-BOS")
        assert [i.route for i in items] == ["SFO-ORD", "ORD-BOS"]
        assert items[1].flight_number is None

    def test_labelled_booking_attaches_and_is_not_a_flight(self):
        items = extract_flights("EK 203 JFK-DXB PNR: ABC123")
        assert len(items) == 1
        assert items[0].booking_ref == "ABC123"

    def test_segment_line_decoded_once(self, segment_line):
        items = extract_flights(f"Itinerary:\n{segment_line}\nEnjoy")
        assert len(items) == 1
        assert items[0].flight_number == "EK203"
        assert items[0].service_class == "Y"

    def test_segments_after_heuristic_items(self, segment_line):
        items = extract_flights(f"{segment_line}\nConnection QR 700")
        assert [i.flight_number for i in items] == ["QR700", "EK203"]

    def test_no_flights_in_prose(self):
        assert extract_flights("see you at the airport tomorrow") == []


class TestBookingReferences:
    def test_labelled_dedup(self):
        assert extract_booking_references("PNR: ABC123\nagain PNR: ABC123") == ["ABC123"]

    def test_all_patterns_in_text_order(self):
        text = "Ref LNEKPQ, Confirmation: 88421\nXY123Z - Booked"
        assert extract_booking_references(text) == ["LNEKPQ", "88421", "XY123Z"]

    def test_label_is_case_insensitive_code_is_not(self):
        assert extract_booking_references("booking: K9X2MT") == ["K9X2MT"]
        assert extract_booking_references("Booking: confirmed") == []

    def test_none(self):
        assert extract_booking_references("Thanks for booking with us") == []
