"""Static test-case tables for the Singlish → Sinhala translator suite.

Expected results against the live site: 24 positive cases pass, 10 negative
cases fail (each failure documents a weakness of the translator), 1 UI case
passes.
"""
from typing import Iterable, Optional, Tuple

from ..models.test_case import ExpectedBehavior, Role, TestCase

_NON_EMPTY = ExpectedBehavior.EXPECT_NON_EMPTY


def _positive(case_id: str, input_text: str, description: str) -> TestCase:
    return TestCase(case_id, input_text, description, Role.POSITIVE, _NON_EMPTY)


def _negative(case_id: str, input_text: str, description: str, behavior: ExpectedBehavior) -> TestCase:
    return TestCase(case_id, input_text, description, Role.NEGATIVE, behavior)


POSITIVE_CASES: Tuple[TestCase, ...] = (
    _positive('Pos_Fun_0004', 'Mama gedhara yanavaa.', 'Convert simple sentence with mixed case'),
    _positive('Pos_Fun_0005', 'Api 3 ta cinema ekata yamu, iita passe 5.30 ta gedhara yamu.',
              'Convert compound sentence with time and numbers'),
    _positive('Pos_Fun_0006', 'Oyaa 2:30 PM ta enavaa nam, mama gedhara inne.',
              'Convert complex sentence with time and negation'),
    _positive('Pos_Fun_0007', 'Meeka Rs. 1500 k vatinavadha?', 'Convert question with currency notation'),
    _positive('Pos_Fun_0008', 'Colombo valata yanna.', 'Convert command with place name'),
    _positive('Pos_Fun_0009', 'Mata 2 kg rice oona.', 'Convert sentence with measurement unit'),
    _positive('Pos_Fun_0010', 'Mata ID ekata photo upload karanna bae.',
              'Convert negative sentence with technical term'),
    _positive('Pos_Fun_0011', '2026-02-15 suba aluth avurudhdhak!', 'Convert greeting with date format'),
    _positive('Pos_Fun_0012', 'karuNaakaralaa mata email eka hasith@gmail.com valata evanna puLuvandha?',
              'Convert polite request with email address'),
    _positive('Pos_Fun_0013', 'Ow, mama mee nambareeta kiyannam (0771234567) .',
              'Convert response with phone number'),
    _positive('Pos_Fun_0014', 'karuNaakaralaa WiFi password eka mata kiyanna puLuvandha?',
              'Convert polite question with technical term'),
    _positive('Pos_Fun_0015', 'Machan, supiri dha?', 'Convert informal slang expression'),
    _positive('Pos_Fun_0016', 'Mata ATM PIN eka amathaka vuNaa.', 'Convert sentence with banking term'),
    _positive('Pos_Fun_0017', 'Website eka google valata yanna, passe login venna.',
              'Convert compound sentence with URL'),
    _positive('Pos_Fun_0018', 'mata   tikak   udhav    karanna.', 'Convert sentence with extra spaces'),
    _positive('Pos_Fun_0019', 'gihilla enna, gihilla enna!', 'Convert repeated expression for emphasis'),
    _positive('Pos_Fun_0020', 'Mata iiye OTP ekak email karala.',
              'Convert past tense with technical abbreviation'),
    _positive('Pos_Fun_0021', 'Mama dhaen Zoom call ekata join velaa.',
              'Convert present continuous with brand name'),
    _positive('Pos_Fun_0022', 'Mama heta QR code eka scan karannam.', 'Convert future tense with technical term'),
    _positive('Pos_Fun_0023', 'Mata USB eka connect karanna epaa.', 'Convert strong negation with abbreviation'),
    _positive('Pos_Fun_0024', 'Mama GPS use karan yanavaa.', 'Convert singular pronoun with GPS term'),
    _positive('Pos_Fun_0025', 'Api 10:00 AM ta meeting ekata join vemu.',
              'Convert plural pronoun with time and English term'),
    _positive('Pos_Fun_0026', 'karuNaakarala document eka PDF format valata convert karanna puLuvandha?',
              'Convert polite request with file format term'),
    _positive(
        'Pos_Fun_0027',
        'Sri Lankawe jathika sanskrutika ha sramika sampradhayen pelapala jana sathkarayata laba dena '
        'purama lokaya ha bauddha dharma adhyayana kramayata anuva IT yugaye siddhiyan hata hatara viruddha '
        'veemath vechal novana siddhiyan ha sampath api upayog karagena nishpanna karanu labena avasthavedi '
        'ape deshapalana ha arthika nirmanaye siddhiyan sandaha API, cloud computing, blockchain, artificial '
        'intelligence wage nayaka teknologiyen upayog kirima sandaha kriyathmaka lesa udav karagena tibena '
        'IT ha software udavvidha novana siddhiyan hata hatara viruddha veemath vechal novana siddhiyan ha '
        'sampath api upayog karagena nishpanna karanu labena avasthavedi ape deshapalana ha arthika '
        'nirmanaye siddhiyan sandaha nayaka teknologiyen upayog kirima sandaha kriyathmaka lesa udav '
        'karagena tibena IT ha software udavvidha siyalla ape deshaye diga vishala vistarayata laba denu athi.',
        'Convert long technical paragraph',
    ),
)

NEGATIVE_CASES: Tuple[TestCase, ...] = (
    _negative('Neg_Fun_0001', '!@#$%^&*()_+-=[]{}|;:,.<>?/~`', 'Test with extreme special characters',
              ExpectedBehavior.EXPECT_EMPTY),
    _negative('Neg_Fun_0002', '123.456.789.0', 'Test with malformed numbers', ExpectedBehavior.EXPECT_EMPTY),
    _negative('Neg_Fun_0003', 'DROP TABLE users; SELECT * FROM admin', 'Test SQL injection security',
              ExpectedBehavior.EXPECT_NO_SQL_ARTIFACT),
    _negative('Neg_Fun_0004', '<script>alert("XSS")</script>', 'Test XSS security',
              ExpectedBehavior.EXPECT_NO_SCRIPT_ARTIFACT),
    _negative('Neg_Fun_0005', '<b>bold</b> and <i>italic</i> text', 'Test with HTML markup',
              ExpectedBehavior.EXPECT_NO_HTML_ARTIFACT),
    _negative('Neg_Fun_0006', '%20%2F%3F%26%3D%2B', 'Test with URL encoded input', ExpectedBehavior.EXPECT_EMPTY),
    _negative('Neg_Fun_0007', 'mama\u0000gedhara\u0007yanavaa', 'Test with control characters',
              ExpectedBehavior.EXPECT_EMPTY),
    _negative('Neg_Fun_0008', 'ABCD1234!@#$' * 50, 'Test with very long repetitive input',
              ExpectedBehavior.EXPECT_LENGTH_BOUNDED),
    _negative('Neg_Fun_0009', 'hello 你好 नमस्ते 안녕하세요 مرحبا ', 'Test with multiple language scripts',
              ExpectedBehavior.EXPECT_SCRIPT_PURITY),
    _negative('Neg_Fun_0010', '01010100 01100101 01110011 01110100 ' * 10, 'Test with binary pattern input',
              ExpectedBehavior.EXPECT_EMPTY),
)

UI_CASES: Tuple[TestCase, ...] = (
    TestCase('Pos_UI_0001', 'api kandy valata yamuda', 'Test delete button clears input field',
             Role.UI, ExpectedBehavior.EXPECT_CLEARED),
)


def ensure_unique_ids(cases: Iterable[TestCase]) -> None:
    seen = set()
    for case in cases:
        if case.id in seen:
            raise ValueError(f"Duplicate test case id: {case.id}")
        seen.add(case.id)


ALL_CASES: Tuple[TestCase, ...] = POSITIVE_CASES + NEGATIVE_CASES + UI_CASES
ensure_unique_ids(ALL_CASES)


def select_cases(roles: Optional[Iterable] = None, ids: Optional[Iterable[str]] = None) -> Tuple[TestCase, ...]:
    """Filter ALL_CASES by role names/enums and/or case ids, keeping table order."""
    role_set = {Role(r) for r in roles} if roles else None
    id_set = set(ids) if ids else None
    return tuple(
        case for case in ALL_CASES
        if (role_set is None or case.role in role_set) and (id_set is None or case.id in id_set)
    )
