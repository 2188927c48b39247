"""Static airport table served by the API."""

from flightfinder.models import AirportModel


SAMPLE_AIRPORTS = (
    AirportModel(code="ATL", name="Hartsfield-Jackson Atlanta International", city="Atlanta"),
    AirportModel(code="PEK", name="Beijing Capital International", city="Beijing"),
    AirportModel(code="DXB", name="Dubai International", city="Dubai"),
    AirportModel(code="LAX", name="Los Angeles International", city="Los Angeles"),
    AirportModel(code="HND", name="Tokyo Haneda International", city="Tokyo"),
    AirportModel(code="ORD", name="O'Hare International", city="Chicago"),
    AirportModel(code="LHR", name="London Heathrow", city="London"),
    AirportModel(code="HKG", name="Hong Kong International", city="Hong Kong"),
    AirportModel(code="PVG", name="Shanghai Pudong International", city="Shanghai"),
    AirportModel(code="CDG", name="Paris Charles de Gaulle", city="Paris"),
    AirportModel(code="DFW", name="Dallas/Fort Worth International", city="Dallas"),
    AirportModel(code="AMS", name="Amsterdam Schiphol", city="Amsterdam"),
    AirportModel(code="FRA", name="Frankfurt am Main", city="Frankfurt"),
    AirportModel(code="IST", name="Istanbul Airport", city="Istanbul"),
    AirportModel(code="CAN", name="Guangzhou Baiyun International", city="Guangzhou"),
    AirportModel(code="JFK", name="John F. Kennedy International", city="New York"),
    AirportModel(code="SIN", name="Singapore Changi", city="Singapore"),
    AirportModel(code="DEN", name="Denver International", city="Denver"),
    AirportModel(code="ICN", name="Incheon International", city="Seoul"),
    AirportModel(code="BKK", name="Suvarnabhumi", city="Bangkok"),
    AirportModel(code="SFO", name="San Francisco International", city="San Francisco"),
    AirportModel(code="SEA", name="Seattle-Tacoma International", city="Seattle"),
    AirportModel(code="MAD", name="Adolfo Suarez Madrid-Barajas", city="Madrid"),
    AirportModel(code="SYD", name="Sydney Kingsford Smith", city="Sydney"),
)
