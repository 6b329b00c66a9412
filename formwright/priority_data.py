"""
Fixed base lists for priority inputs.

COUNTRIES holds English short country names. TIME_ZONES holds friendly zone
names with their standard UTC offset in minutes and IANA identifier; labels
use the standard offset so output does not depend on the current date.
"""

from typing import List, NamedTuple, Tuple

COUNTRIES = [
    "Afghanistan", "Aland Islands", "Albania", "Algeria", "American Samoa", "Andorra",
    "Angola", "Anguilla", "Antarctica", "Antigua And Barbuda", "Argentina", "Armenia",
    "Aruba", "Australia", "Austria", "Azerbaijan", "Bahamas", "Bahrain", "Bangladesh",
    "Barbados", "Belarus", "Belgium", "Belize", "Benin", "Bermuda", "Bhutan", "Bolivia",
    "Bosnia and Herzegowina", "Botswana", "Bouvet Island", "Brazil",
    "British Indian Ocean Territory", "Brunei Darussalam", "Bulgaria", "Burkina Faso",
    "Burundi", "Cambodia", "Cameroon", "Canada", "Cape Verde", "Cayman Islands",
    "Central African Republic", "Chad", "Chile", "China", "Christmas Island",
    "Cocos (Keeling) Islands", "Colombia", "Comoros", "Congo",
    "Congo, the Democratic Republic of the", "Cook Islands", "Costa Rica",
    "Cote d'Ivoire", "Croatia", "Cuba", "Cyprus", "Czech Republic", "Denmark",
    "Djibouti", "Dominica", "Dominican Republic", "Ecuador", "Egypt", "El Salvador",
    "Equatorial Guinea", "Eritrea", "Estonia", "Ethiopia", "Falkland Islands (Malvinas)",
    "Faroe Islands", "Fiji", "Finland", "France", "French Guiana", "French Polynesia",
    "French Southern Territories", "Gabon", "Gambia", "Georgia", "Germany", "Ghana",
    "Gibraltar", "Greece", "Greenland", "Grenada", "Guadeloupe", "Guam", "Guatemala",
    "Guernsey", "Guinea", "Guinea-Bissau", "Guyana", "Haiti",
    "Heard and McDonald Islands", "Holy See (Vatican City State)", "Honduras",
    "Hong Kong", "Hungary", "Iceland", "India", "Indonesia", "Iran, Islamic Republic of",
    "Iraq", "Ireland", "Isle of Man", "Israel", "Italy", "Jamaica", "Japan", "Jersey",
    "Jordan", "Kazakhstan", "Kenya", "Kiribati", "Korea, Democratic People's Republic of",
    "Korea, Republic of", "Kuwait", "Kyrgyzstan", "Lao People's Democratic Republic",
    "Latvia", "Lebanon", "Lesotho", "Liberia", "Libyan Arab Jamahiriya", "Liechtenstein",
    "Lithuania", "Luxembourg", "Macao", "Macedonia, The Former Yugoslav Republic Of",
    "Madagascar", "Malawi", "Malaysia", "Maldives", "Mali", "Malta", "Marshall Islands",
    "Martinique", "Mauritania", "Mauritius", "Mayotte", "Mexico",
    "Micronesia, Federated States of", "Moldova, Republic of", "Monaco", "Mongolia",
    "Montenegro", "Montserrat", "Morocco", "Mozambique", "Myanmar", "Namibia", "Nauru",
    "Nepal", "Netherlands", "Netherlands Antilles", "New Caledonia", "New Zealand",
    "Nicaragua", "Niger", "Nigeria", "Niue", "Norfolk Island", "Northern Mariana Islands",
    "Norway", "Oman", "Pakistan", "Palau", "Palestinian Territory, Occupied", "Panama",
    "Papua New Guinea", "Paraguay", "Peru", "Philippines", "Pitcairn", "Poland",
    "Portugal", "Puerto Rico", "Qatar", "Reunion", "Romania", "Russian Federation",
    "Rwanda", "Saint Barthelemy", "Saint Helena", "Saint Kitts and Nevis", "Saint Lucia",
    "Saint Pierre and Miquelon", "Saint Vincent and the Grenadines", "Samoa",
    "San Marino", "Sao Tome and Principe", "Saudi Arabia", "Senegal", "Serbia",
    "Seychelles", "Sierra Leone", "Singapore", "Slovakia", "Slovenia", "Solomon Islands",
    "Somalia", "South Africa", "South Georgia and the South Sandwich Islands", "Spain",
    "Sri Lanka", "Sudan", "Suriname", "Svalbard and Jan Mayen", "Swaziland", "Sweden",
    "Switzerland", "Syrian Arab Republic", "Taiwan, Province of China", "Tajikistan",
    "Tanzania, United Republic of", "Thailand", "Timor-Leste", "Togo", "Tokelau",
    "Tonga", "Trinidad and Tobago", "Tunisia", "Turkey", "Turkmenistan",
    "Turks and Caicos Islands", "Tuvalu", "Uganda", "Ukraine", "United Arab Emirates",
    "United Kingdom", "United States", "United States Minor Outlying Islands", "Uruguay",
    "Uzbekistan", "Vanuatu", "Venezuela", "Viet Nam", "Virgin Islands, British",
    "Virgin Islands, U.S.", "Wallis and Futuna", "Western Sahara", "Yemen", "Zambia",
    "Zimbabwe",
]


class TimeZone(NamedTuple):
    name: str
    utc_offset: int
    identifier: str

    @property
    def formatted_offset(self) -> str:
        sign = '-' if self.utc_offset < 0 else '+'
        hours, minutes = divmod(abs(self.utc_offset), 60)
        return f"{sign}{hours:02d}:{minutes:02d}"

    @property
    def label(self) -> str:
        return f"(GMT{self.formatted_offset}) {self.name}"


_ZONES: List[Tuple[str, int, str]] = [
    ("International Date Line West", -660, "Pacific/Midway"),
    ("Midway Island", -660, "Pacific/Midway"),
    ("Samoa", -660, "Pacific/Pago_Pago"),
    ("Hawaii", -600, "Pacific/Honolulu"),
    ("Alaska", -540, "America/Juneau"),
    ("Pacific Time (US & Canada)", -480, "America/Los_Angeles"),
    ("Tijuana", -480, "America/Tijuana"),
    ("Arizona", -420, "America/Phoenix"),
    ("Chihuahua", -420, "America/Chihuahua"),
    ("Mazatlan", -420, "America/Mazatlan"),
    ("Mountain Time (US & Canada)", -420, "America/Denver"),
    ("Central America", -360, "America/Guatemala"),
    ("Central Time (US & Canada)", -360, "America/Chicago"),
    ("Guadalajara", -360, "America/Mexico_City"),
    ("Mexico City", -360, "America/Mexico_City"),
    ("Monterrey", -360, "America/Monterrey"),
    ("Saskatchewan", -360, "America/Regina"),
    ("Bogota", -300, "America/Bogota"),
    ("Eastern Time (US & Canada)", -300, "America/New_York"),
    ("Indiana (East)", -300, "America/Indiana/Indianapolis"),
    ("Lima", -300, "America/Lima"),
    ("Quito", -300, "America/Lima"),
    ("Caracas", -270, "America/Caracas"),
    ("Atlantic Time (Canada)", -240, "America/Halifax"),
    ("La Paz", -240, "America/La_Paz"),
    ("Santiago", -240, "America/Santiago"),
    ("Newfoundland", -210, "America/St_Johns"),
    ("Brasilia", -180, "America/Sao_Paulo"),
    ("Buenos Aires", -180, "America/Argentina/Buenos_Aires"),
    ("Georgetown", -180, "America/Guyana"),
    ("Greenland", -180, "America/Godthab"),
    ("Mid-Atlantic", -120, "Atlantic/South_Georgia"),
    ("Azores", -60, "Atlantic/Azores"),
    ("Cape Verde Is.", -60, "Atlantic/Cape_Verde"),
    ("Casablanca", 0, "Africa/Casablanca"),
    ("Dublin", 0, "Europe/Dublin"),
    ("Edinburgh", 0, "Europe/London"),
    ("Lisbon", 0, "Europe/Lisbon"),
    ("London", 0, "Europe/London"),
    ("Monrovia", 0, "Africa/Monrovia"),
    ("UTC", 0, "Etc/UTC"),
    ("Amsterdam", 60, "Europe/Amsterdam"),
    ("Belgrade", 60, "Europe/Belgrade"),
    ("Berlin", 60, "Europe/Berlin"),
    ("Bern", 60, "Europe/Berlin"),
    ("Bratislava", 60, "Europe/Bratislava"),
    ("Brussels", 60, "Europe/Brussels"),
    ("Budapest", 60, "Europe/Budapest"),
    ("Copenhagen", 60, "Europe/Copenhagen"),
    ("Ljubljana", 60, "Europe/Ljubljana"),
    ("Madrid", 60, "Europe/Madrid"),
    ("Paris", 60, "Europe/Paris"),
    ("Prague", 60, "Europe/Prague"),
    ("Rome", 60, "Europe/Rome"),
    ("Sarajevo", 60, "Europe/Sarajevo"),
    ("Skopje", 60, "Europe/Skopje"),
    ("Stockholm", 60, "Europe/Stockholm"),
    ("Vienna", 60, "Europe/Vienna"),
    ("Warsaw", 60, "Europe/Warsaw"),
    ("West Central Africa", 60, "Africa/Algiers"),
    ("Zagreb", 60, "Europe/Zagreb"),
    ("Athens", 120, "Europe/Athens"),
    ("Bucharest", 120, "Europe/Bucharest"),
    ("Cairo", 120, "Africa/Cairo"),
    ("Harare", 120, "Africa/Harare"),
    ("Helsinki", 120, "Europe/Helsinki"),
    ("Istanbul", 120, "Europe/Istanbul"),
    ("Jerusalem", 120, "Asia/Jerusalem"),
    ("Kyiv", 120, "Europe/Kiev"),
    ("Pretoria", 120, "Africa/Johannesburg"),
    ("Riga", 120, "Europe/Riga"),
    ("Sofia", 120, "Europe/Sofia"),
    ("Tallinn", 120, "Europe/Tallinn"),
    ("Vilnius", 120, "Europe/Vilnius"),
    ("Baghdad", 180, "Asia/Baghdad"),
    ("Kuwait", 180, "Asia/Kuwait"),
    ("Minsk", 180, "Europe/Minsk"),
    ("Nairobi", 180, "Africa/Nairobi"),
    ("Riyadh", 180, "Asia/Riyadh"),
    ("Tehran", 210, "Asia/Tehran"),
    ("Abu Dhabi", 240, "Asia/Muscat"),
    ("Baku", 240, "Asia/Baku"),
    ("Moscow", 180, "Europe/Moscow"),
    ("Muscat", 240, "Asia/Muscat"),
    ("St. Petersburg", 180, "Europe/Moscow"),
    ("Tbilisi", 240, "Asia/Tbilisi"),
    ("Volgograd", 180, "Europe/Moscow"),
    ("Yerevan", 240, "Asia/Yerevan"),
    ("Kabul", 270, "Asia/Kabul"),
    ("Ekaterinburg", 300, "Asia/Yekaterinburg"),
    ("Islamabad", 300, "Asia/Karachi"),
    ("Karachi", 300, "Asia/Karachi"),
    ("Tashkent", 300, "Asia/Tashkent"),
    ("Chennai", 330, "Asia/Kolkata"),
    ("Kolkata", 330, "Asia/Kolkata"),
    ("Mumbai", 330, "Asia/Kolkata"),
    ("New Delhi", 330, "Asia/Kolkata"),
    ("Sri Jayawardenepura", 330, "Asia/Colombo"),
    ("Kathmandu", 345, "Asia/Kathmandu"),
    ("Almaty", 360, "Asia/Almaty"),
    ("Astana", 360, "Asia/Dhaka"),
    ("Dhaka", 360, "Asia/Dhaka"),
    ("Novosibirsk", 360, "Asia/Novosibirsk"),
    ("Rangoon", 390, "Asia/Rangoon"),
    ("Bangkok", 420, "Asia/Bangkok"),
    ("Hanoi", 420, "Asia/Bangkok"),
    ("Jakarta", 420, "Asia/Jakarta"),
    ("Krasnoyarsk", 420, "Asia/Krasnoyarsk"),
    ("Beijing", 480, "Asia/Shanghai"),
    ("Chongqing", 480, "Asia/Chongqing"),
    ("Hong Kong", 480, "Asia/Hong_Kong"),
    ("Irkutsk", 480, "Asia/Irkutsk"),
    ("Kuala Lumpur", 480, "Asia/Kuala_Lumpur"),
    ("Perth", 480, "Australia/Perth"),
    ("Singapore", 480, "Asia/Singapore"),
    ("Taipei", 480, "Asia/Taipei"),
    ("Ulaan Bataar", 480, "Asia/Ulaanbaatar"),
    ("Urumqi", 480, "Asia/Urumqi"),
    ("Osaka", 540, "Asia/Tokyo"),
    ("Sapporo", 540, "Asia/Tokyo"),
    ("Seoul", 540, "Asia/Seoul"),
    ("Tokyo", 540, "Asia/Tokyo"),
    ("Yakutsk", 540, "Asia/Yakutsk"),
    ("Adelaide", 570, "Australia/Adelaide"),
    ("Darwin", 570, "Australia/Darwin"),
    ("Brisbane", 600, "Australia/Brisbane"),
    ("Canberra", 600, "Australia/Melbourne"),
    ("Guam", 600, "Pacific/Guam"),
    ("Hobart", 600, "Australia/Hobart"),
    ("Melbourne", 600, "Australia/Melbourne"),
    ("Port Moresby", 600, "Pacific/Port_Moresby"),
    ("Sydney", 600, "Australia/Sydney"),
    ("Vladivostok", 600, "Asia/Vladivostok"),
    ("Magadan", 660, "Asia/Magadan"),
    ("New Caledonia", 660, "Pacific/Noumea"),
    ("Solomon Is.", 660, "Asia/Magadan"),
    ("Auckland", 720, "Pacific/Auckland"),
    ("Fiji", 720, "Pacific/Fiji"),
    ("Kamchatka", 720, "Asia/Kamchatka"),
    ("Marshall Is.", 720, "Pacific/Majuro"),
    ("Wellington", 720, "Pacific/Auckland"),
    ("Nuku'alofa", 780, "Pacific/Tongatapu"),
]

# Sorted by offset then name, the order zone selects present them in
TIME_ZONES = sorted((TimeZone(*zone) for zone in _ZONES), key=lambda z: (z.utc_offset, z.name))


def country_collection() -> List[Tuple[str, str]]:
    """Country list as (label, value) pairs."""
    return [(country, country) for country in COUNTRIES]


def time_zone_collection() -> List[Tuple[str, str]]:
    """Time zone list as (label, value) pairs."""
    return [(zone.label, zone.name) for zone in TIME_ZONES]
