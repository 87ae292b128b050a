"""Embedded legacy identifier tables.

Numeric identifiers were assigned to studies and files before accessions were
available. Historical records still carry them, so both spellings must stay
resolvable. Keys are the legacy numeric identifiers, values the accessions.
"""

from __future__ import annotations

STUDY_ACCESSIONS: dict[str, str] = {
    "2": "PRJEB5439",
    "130": "PRJEB8661",
    "156": "PRJEB5829",
    "301": "PRJEB6930",
    "5385": "PRJEB6041",
    "5404": "PRJEB6042",
    "5423": "PRJEB7895",
    "5442": "PRJEB7218",
    "5459": "PRJEB8705",
    "5480": "PRJEB7217",
    "5509": "PRJEB8652",
    "5643": "PRJEB8650",
    "5778": "PRJEB7923",
    "6558": "PRJEB7894",
    "8413": "PRJEB6911",
    "8476": "PRJEB5473",
    "8531": "PRJEB4395",
    "8616": "PRJEB4019",
    "11645": "PRJEB8639",
    "12002": "PRJEB6025",
    "12204": "PRJEB6495",
    "12235": "PRJEB5978",
    "12270": "PRJEB6057",
    "12474": "PRJEB6119",
    "12504": "PRJEB7061",
    "12569": "PRJEB7723",
    "33687": "PRJEB9507",
    "34064": "PRJEB629",
    "34711": "PRJX00001",
}

FILE_ACCESSIONS: dict[str, str] = {
    "24": "ERZ017137",
    "27": "ERZ017130",
    "30": "ERZ017135",
    "35": "ERZ017123",
    "37": "ERZ017129",
    "41": "ERZ017143",
    "46": "ERZ017125",
    "48": "ERZ017121",
    "50": "ERZ017122",
    "52": "ERZ017134",
    "54": "ERZ017142",
    "56": "ERZ017133",
    "58": "ERZ017141",
    "60": "ERZ017126",
    "70": "ERZ017132",
    "72": "ERZ017138",
    "76": "ERZ017136",
    "81": "ERZ017127",
    "83": "ERZ017131",
    "85": "ERZ017124",
    "110": "ERZ017140",
    "122": "ERZ017144",
    "175": "ERZ019949",
    "185": "ERZX00006",
    "187": "ERZ019943",
    "189": "ERZ019955",
    "193": "ERZ019940",
    "203": "ERZ019944",
    "208": "ERZ019953",
    "210": "ERZ019956",
    "212": "ERZ019941",
    "216": "ERZ019947",
    "218": "ERZ019961",
    "222": "ERZ019946",
    "224": "ERZ019960",
    "226": "ERZ019950",
    "228": "ERZ019942",
    "230": "ERZ019952",
    "232": "ERZ019958",
    "274": "ERZ019957",
    "278": "ERZ019954",
    "282": "ERZ019959",
    "292": "ERZ019948",
    "294": "ERZ019962",
    "5380": "ERZX00049",
    "5382": "ERZX00035",
    "5399": "ERZ038109",
    "5418": "ERZX00026",
    "5437": "ERZ049522",
    "5473": "ERZ097166",
    "5477": "ERZ038104",
    "5494": "ERZ038105",
    "5537": "ERZ094205",
    "5542": "ERZ094204",
    "5544": "ERZ094197",
    "5545": "ERZ094208",
    "5549": "ERZ094192",
    "5552": "ERZ094203",
    "5553": "ERZ094198",
    "5554": "ERZ094211",
    "5558": "ERZ094199",
    "5560": "ERZ094202",
    "5562": "ERZ094210",
    "5564": "ERZ094207",
    "5566": "ERZ094206",
    "5568": "ERZ094209",
    "5572": "ERZ094193",
    "5574": "ERZ094195",
    "5577": "ERZ094190",
    "5579": "ERZ094196",
    "5581": "ERZ094194",
    "5584": "ERZ094213",
    "5586": "ERZ094200",
    "5588": "ERZ094212",
    "5590": "ERZ094201",
    "5598": "ERZ094191",
    "5673": "ERZ094188",
    "5676": "ERZ094168",
    "5680": "ERZ094174",
    "5683": "ERZ094176",
    "5684": "ERZ094173",
    "5687": "ERZ094170",
    "5688": "ERZ094181",
    "5691": "ERZ094167",
    "5692": "ERZ094169",
    "5695": "ERZ094180",
    "5697": "ERZ094187",
    "5700": "ERZ094177",
    "5701": "ERZ094186",
    "5702": "ERZ094183",
    "5706": "ERZ094175",
    "5708": "ERZ094179",
    "5709": "ERZ094185",
    "5712": "ERZ094184",
    "5716": "ERZ094171",
    "5719": "ERZ094166",
    "5721": "ERZ094178",
    "5722": "ERZ094189",
    "5725": "ERZ094182",
    "5743": "ERZ094172",
    "6521": "ERZ017139",
    "6550": "ERZ017128",
    "8583": "ERZX00043",
    "8585": "ERZX00051",
    "8587": "ERZX00031",
    "8589": "ERZX00044",
    "8591": "ERZX00040",
    "8593": "ERZX00046",
    "8595": "ERZX00047",
    "8597": "ERZX00039",
    "8599": "ERZX00034",
    "8601": "ERZX00037",
    "8603": "ERZX00038",
    "8605": "ERZX00045",
    "8607": "ERZX00032",
    "8609": "ERZX00036",
    "8611": "ERZX00042",
    "8614": "ERZX00052",
    "9861": "ERZX00041",
    "11452": "ERZX00033",
    "11455": "ERZX00048",
    "11460": "ERZ015710",
    "11463": "ERZ015363",
    "11466": "ERZ015359",
    "11469": "ERZ015345",
    "11471": "ERZ015361",
    "11474": "ERZ015369",
    "11477": "ERZ015358",
    "11482": "ERZ015354",
    "11485": "ERZ015362",
    "11489": "ERZ015352",
    "11491": "ERZ015353",
    "11495": "ERZ015348",
    "11501": "ERZ015349",
    "11507": "ERZ015346",
    "11511": "ERZ015368",
    "11517": "ERZ015355",
    "11519": "ERZ015347",
    "11521": "ERZ015351",
    "11523": "ERZ015357",
    "11525": "ERZ015365",
    "11527": "ERZ015367",
    "11529": "ERZ015356",
    "11531": "ERZ015366",
    "11535": "ERZ015350",
    "11701": "ERZ094151",
    "11703": "ERZ094149",
    "11705": "ERZ094135",
    "11707": "ERZ094148",
    "11712": "ERZ094132",
    "11713": "ERZ094144",
    "11717": "ERZ094150",
    "11721": "ERZ094142",
    "11723": "ERZ094145",
    "11724": "ERZ094137",
    "11727": "ERZ094147",
    "11729": "ERZ094134",
    "11731": "ERZ094139",
    "11734": "ERZ094130",
    "11736": "ERZ094133",
    "11742": "ERZ094136",
    "11745": "ERZ094131",
    "11753": "ERZ094129",
    "11756": "ERZ094138",
    "11758": "ERZ094146",
    "11760": "ERZ094143",
    "11768": "ERZ094141",
    "11795": "ERZ094140",
    "11810": "ERZ094152",
    "34705": "ERZ108740",
    "34850": "ERZX00073",
    "34852": "ERZX00064",
    "34854": "ERZX00057",
    "34856": "ERZX00069",
    "34858": "ERZX00067",
    "34860": "ERZX00056",
    "34862": "ERZX00055",
    "34864": "ERZX00063",
    "34866": "ERZX00060",
    "34870": "ERZX00070",
    "34872": "ERZX00071",
    "34876": "ERZX00076",
    "34878": "ERZX00054",
    "34879": "ERZX00066",
    "34882": "ERZX00072",
    "34884": "ERZX00074",
    "34886": "ERZX00061",
    "34888": "ERZX00059",
    "34890": "ERZX00065",
    "34892": "ERZX00053",
    "34894": "ERZX00075",
    "34896": "ERZX00068",
    "34923": "ERZX00058",
    "34926": "ERZX00062",
}

__all__ = ["FILE_ACCESSIONS", "STUDY_ACCESSIONS"]
