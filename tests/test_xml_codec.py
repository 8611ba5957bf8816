"""
Unit tests for FSXChallenge XML encoding and decoding.
"""
import pytest
from lxml import etree

from fsx_challenge.domain.units import Meters
from fsx_challenge.infrastructure.xml_codec import (
    ChallengeDecodingError,
    ChallengeEncodingError,
    decode_challenge,
    encode_challenge,
)
from fsx_challenge.services.domain.challenge_builder import ChallengeBuilder


STATION_ELEMENTS = [
    "ArrayIndex", "Desc", "StationNum", "SkillType",
    "NumShotsAm", "NumShotsPro", "NumShotsToUse",
    "TrgtDistWomen", "TrgtDistAm", "TrgtDistPro",
    "InnerRingDiamAm", "MidRingDiamAm", "OuterRingDiamAm",
    "InnerRingDiamPro", "MidRingDiamPro", "OuterRingDiamPro",
    "InnerScore", "MidScore", "OuterScore",
    "Obstacle", "ObstacleDist",
]


@pytest.fixture
def challenge(sample_yardages, default_params):
    return ChallengeBuilder().assemble(sample_yardages, default_params)


# ============================================================
# Encoding Tests
# ============================================================

class TestEncoding:
    """Tests for encode_challenge."""

    def test_root_layout(self, challenge):
        root = etree.fromstring(encode_challenge(challenge).encode())

        assert root.tag == "FSXChallenge"
        tags = [child.tag for child in root]
        assert tags[:2] == ["Name", "NumStations"]
        assert tags[2:] == ["Station"] * 20
        assert root.findtext("Name") == challenge.name
        assert root.findtext("NumStations") == "20"

    def test_station_element_order(self, challenge):
        root = etree.fromstring(encode_challenge(challenge).encode())

        for station in root.iter("Station"):
            assert [child.tag for child in station] == STATION_ELEMENTS

    def test_lengths_render_as_reals(self, challenge):
        root = etree.fromstring(encode_challenge(challenge).encode())
        first = root.find("Station")

        assert first.findtext("InnerRingDiamAm") == "7.315"
        assert first.findtext("ObstacleDist") == "0.0"
        assert float(first.findtext("TrgtDistAm")) == challenge.stations[0].trgt_dist_am.as_real()

    def test_scalar_fields(self, challenge):
        root = etree.fromstring(encode_challenge(challenge).encode())
        station = root.findall("Station")[3]

        assert station.findtext("ArrayIndex") == "3"
        assert station.findtext("StationNum") == "4"
        assert station.findtext("Desc") == "1"
        assert station.findtext("InnerScore") == "5"

    def test_no_xml_declaration(self, challenge):
        assert encode_challenge(challenge).startswith("<FSXChallenge>")

    def test_pretty_print_indents(self, challenge):
        assert "\n  <Name>" in encode_challenge(challenge, pretty_print=True)

    def test_unencodable_text_raises(self, challenge):
        broken = challenge.model_copy(update={"name": "bad\x00name"})

        with pytest.raises(ChallengeEncodingError):
            encode_challenge(broken)


# ============================================================
# Decoding Tests
# ============================================================

class TestDecoding:
    """Tests for decode_challenge."""

    def test_decodes_encoded_challenge(self, challenge):
        decoded = decode_challenge(encode_challenge(challenge))

        assert decoded.name == challenge.name
        assert decoded.num_stations == challenge.num_stations
        for original, parsed in zip(challenge.stations, decoded.stations):
            assert parsed.array_index == original.array_index
            assert parsed.inner_score == original.inner_score
            # Parsing truncates the rendered real, so allow one milli-meter
            assert abs(parsed.trgt_dist_am.milli - original.trgt_dist_am.milli) <= 1
            assert abs(parsed.outer_ring_diam_pro.milli - original.outer_ring_diam_pro.milli) <= 1

    def test_decodes_lengths_as_meters(self):
        document = (
            "<FSXChallenge><Name>x</Name><NumStations>1</NumStations>"
            "<Station><ArrayIndex>0</ArrayIndex><Desc>1</Desc><StationNum>1</StationNum>"
            "<SkillType>0</SkillType><NumShotsAm>1</NumShotsAm><NumShotsPro>1</NumShotsPro>"
            "<NumShotsToUse>1</NumShotsToUse><TrgtDistWomen>18.25</TrgtDistWomen>"
            "<TrgtDistAm>18.25</TrgtDistAm><TrgtDistPro>18.25</TrgtDistPro>"
            "<InnerRingDiamAm>7.315</InnerRingDiamAm><MidRingDiamAm>14.63</MidRingDiamAm>"
            "<OuterRingDiamAm>21.945</OuterRingDiamAm><InnerRingDiamPro>7.315</InnerRingDiamPro>"
            "<MidRingDiamPro>14.63</MidRingDiamPro><OuterRingDiamPro>21.945</OuterRingDiamPro>"
            "<InnerScore>5</InnerScore><MidScore>3</MidScore><OuterScore>1</OuterScore>"
            "<Obstacle>0</Obstacle><ObstacleDist>0</ObstacleDist></Station>"
            "</FSXChallenge>"
        )
        decoded = decode_challenge(document)

        assert decoded.num_stations == 1
        assert decoded.stations[0].trgt_dist_am == Meters(18_250)
        assert decoded.stations[0].obstacle_dist == Meters(0)

    def test_malformed_xml_rejected(self):
        with pytest.raises(ChallengeDecodingError):
            decode_challenge("<FSXChallenge>")

    def test_wrong_root_rejected(self):
        with pytest.raises(ChallengeDecodingError):
            decode_challenge("<Course><Name>x</Name></Course>")

    def test_station_count_mismatch_rejected(self, challenge):
        document = encode_challenge(challenge).replace(
            "<NumStations>20</NumStations>", "<NumStations>5</NumStations>"
        )

        with pytest.raises(ChallengeDecodingError):
            decode_challenge(document)

    def test_out_of_order_array_index_rejected(self, challenge):
        root = etree.fromstring(encode_challenge(challenge).encode())
        root.findall("Station")[1].find("ArrayIndex").text = "7"

        with pytest.raises(ChallengeDecodingError):
            decode_challenge(etree.tostring(root))

    def test_station_num_must_follow_index(self, challenge):
        root = etree.fromstring(encode_challenge(challenge).encode())
        root.findall("Station")[4].find("StationNum").text = "4"

        with pytest.raises(ChallengeDecodingError):
            decode_challenge(etree.tostring(root))

    def test_missing_fields_rejected(self):
        with pytest.raises(ChallengeDecodingError):
            decode_challenge("<FSXChallenge><Name>x</Name><Station/></FSXChallenge>")
