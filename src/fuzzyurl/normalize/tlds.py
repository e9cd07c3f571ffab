"""Lookup tables used by the URL corrector."""

GENERIC_TLDS = frozenset("""
    COM ORG NET EDU GOV MIL INT INFO BIZ NAME PRO AERO COOP MUSEUM MOBI ASIA
    TEL TRAVEL JOBS CAT XXX POST ARPA APP DEV IO AI CLOUD TECH ONLINE SITE
    STORE SHOP BLOG XYZ TOP CLUB NEWS LIVE WIKI DESIGN AGENCY MEDIA DIGITAL
    EMAIL SOLUTIONS SERVICES SYSTEMS NETWORK SOFTWARE CODES PAGE LINK SPACE
    WEBSITE WORLD TODAY LIFE GROUP COMPANY BUSINESS NINJA ROCKS GURU ZONE
""".split())

COUNTRY_TLDS = frozenset("""
    AC AD AE AF AG AI AL AM AO AQ AR AS AT AU AW AX AZ BA BB BD BE BF BG BH
    BI BJ BM BN BO BR BS BT BW BY BZ CA CC CD CF CG CH CI CK CL CM CN CO CR
    CU CV CW CX CY CZ DE DJ DK DM DO DZ EC EE EG ER ES ET EU FI FJ FK FM FO
    FR GA GD GE GF GG GH GI GL GM GN GP GQ GR GS GT GU GW GY HK HM HN HR HT
    HU ID IE IL IM IN IO IQ IR IS IT JE JM JO JP KE KG KH KI KM KN KP KR KW
    KY KZ LA LB LC LI LK LR LS LT LU LV LY MA MC MD ME MG MH MK ML MM MN MO
    MP MQ MR MS MT MU MV MW MX MY MZ NA NC NE NF NG NI NL NO NP NR NU NZ OM
    PA PE PF PG PH PK PL PM PN PR PS PT PW PY QA RE RO RS RU RW SA SB SC SD
    SE SG SH SI SK SL SM SN SO SR SS ST SU SV SX SY SZ TC TD TF TG TH TJ TK
    TL TM TN TO TR TT TV TW TZ UA UG UK US UY UZ VA VC VE VG VI VN VU WF WS
    YE YT ZA ZM ZW
""".split())

# Upper-case, as returned by the TLD check in the corrector
VALID_TLDS = GENERIC_TLDS | COUNTRY_TLDS

# Sites that are conventionally served from www.
COMMON_SITES = frozenset({
    "google.com",
    "facebook.com",
    "twitter.com",
    "youtube.com",
    "instagram.com",
    "linkedin.com",
    "wikipedia.org",
    "amazon.com",
})
