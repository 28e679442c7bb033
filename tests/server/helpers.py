"""Sample sentences for server tests."""

GGA_LINE = (
    "$GPGGA,232200.000,1445.1076,N,02315.4370,W,2,08,1.10,310.5,M,-31.9,M,0000,0000*54"
)
GSA_LINE = "$GPGSA,A,3,03,06,19,24,12,28,01,17,,,,,1.39,1.10,0.84*00"
RMC_LINE = "$GPRMC,232158.000,A,1445.1076,N,02315.4367,W,0.27,232.04,190516,,,D*79"

BAD_CHECKSUM_LINE = GGA_LINE[:-2] + "55"
UNKNOWN_TYPE_LINE = "$GPVTG,230.17,T,,M,0.38,N,0.70,K,D*33"
BAD_LATITUDE_LINE = "$GPGGA,123519.00,,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*7F"


def post_line(client, line: str):
    return client.post("/sentences", json={"line": line})
