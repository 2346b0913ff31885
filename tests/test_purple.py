import string

import pytest

from purple import AlphabetError, ConfigError, KeyFormatError, Purple

ALPHABET = string.ascii_uppercase
KEY = "9-1,24,6-23"
DAILY = "NOKTYUXEQLHBRMPDICJASVWGZF"

# Part 1 of the 14 part message. Cipher lines and plain lines alternate,
# with blank lines between pairs. Garbles are marked with '-'.
PART1 = """
ZTXODNWKCCMAVNZXYWEETUQTCIMNVEUVIWBLUAXRRTLVA
FOVTATAKIDASINIMUIMINOMOXIWOIRUBESIFYXXFCKZZR

RGNTPCNOIUPJLCIVRTPJKAUHVMUDTHKTXYZELQTVWGBUHFAWSH
DXOOVBTNFYXFAEMEMORANDUMFIOFOVOOMOJIBAKARIFYXRAICC

ULBFBHEXMYHFLOWD-KWHKKNXEBVPYHHGHEKXIOHQHUHWIKYJYH
YLFCBBCFCTHEGOVE-NMENTOFJAPANLFLPROMPTEDBYAGENUINE

PPFEALNNAKIBOOZNFRLQCFLJTTSSDDOIOCVT-ZCKQTSHXTIJCN
DESIRETOCOMETOANAMICABLEUNDERSTANDIN-WITHTHEGOVERN

WXOKUFNQR-TAOIHWTATWVHOTGCGAKVANKZANMUIN
MENTOFTHE-NITEDSTATESINORDERTHATTHETWOCO

YOYJFSRDKKSEQBWKIOORJAUWKXQGUWPDUDZNDRMDHVHYPNIZXB
UNTRIESBYTHEIRJOINTEFFORTSMAYSECURETHEPEACEOFTHEPA

GICXRMAWMFTIUDBXIENLONOQVQKYCOTVSHVNZZQPDLMXVNRUUN
CIFICAREAANDTHEREBYCONTRIBUTETOWARDTHEREALIZATIONO

QFTCDFECZDFGMXEHHWYONHYNJDOVJUNCSUVKKEIWOLKRBUUSOZ
FWORLDPEACELFLHASCONTINUEDNEGOTIATIONSWITHTHEUTMOS

UIGNISMWUOSBOBLJXERZJEQYQMTFTXBJNCMJKVRKOTSOPBOYMK
TSINCERITYSINCEAPRILLASTWITHTHEGOVERNMENTOFTHEUNIT

IRETINCPSQJAWVHUFKRMAMXNZUIFNOPUEMHGLOEJHZOOKHHEED
EDSTATESREGARDINGTHEADJUSTMENTANDADVANCEMENTOFJAPA

NIHXFXFXGPDZBSKAZABYEKYEPNIYSHVKFRFPVCJTPTOYCNEIQB
NESEVVFAMERICANRELATIONSANDTHESTABILIZATIONOFTHEPA

FEXMERMIZLGDRXZORLZFSQYPZFATZCHUGRNHWDDTAIHYOOCOOD
CIFICAREACFCCCFTHEJAPANESEQOVERNMENXHASTHEHONORTOS

UZYIWJROOJUMUIHRBEJFONAXGNCKAOARDIHCDZKIXPR--DIMUW
TATEFRANKLYITSVIEWSCONCERNINGTHECLAIMSTHEAM--VCANG

OMHLTJSOUXPFKGEPWJOMTUVKMWRKTACUPIGAFEDFVRKXFXLFGU
OVERNMENTHASUERSISTENTLYMAINTAINEDASWELLASTHEMEASU

RDETJIYOLKBHZKXOJDDOVRHMMUQBFOWRODMRMUWNAYKYPISDLH
RESTHEUNITEDSTATESANDGREATBRITAINHAVETAKENTOWARDJA

ECKINLJORKWNWXADAJOLONOEVMUQDFIDSPEBBPWROFBOPAZJEU
PANDURINGTHKSEEIGHTMONTHSCYCCCFLFCDDCFCITISTHEIMMU

USBHGIORCSUUQKIIEHPCTJRWSOGLETZLOUKKEOJOSMKJBWUCDD
TABLXPOLWCYOFTHEJAPANESEGOVERNMENTTOINSURETHESTABI

CPYUUWCSSKWWVLIUPKYXGKQOKAZTEZFHGVPJFEWEUBKLIZLWKK
LITYOFEASTASIAANDTOPROMOTEWORLZPEACELFLANDTHEREBYT

OBXLEPQPDATWUSUUPKYRHNWDZXXGTWDDNSHDCBCJXAOOEEPUBP
OEIABLEALLNATIONSTOFINDEACHITSPROPERPLACEINTHEWORL

WFRBQSFXSEZJJYAANMG-WLYMGWAQDGIVNOHKOUTIXYFOKNGGBF
DCFCCCFEVERSINCETHE-HINAAFFAIRBROKEOUTOWINGTOTHEFA

GANPWTUYLBEFFKUFLEXOIUUANVMMJEQUSFHFDOHQLAKWTBYYYL
ILUREONTHEPARTOFCHINATOCOMPREHENLJAPANVCFSTRUEYNTE

NTLYTSXCGKCEEWQRYAVGRKXIANPXNOFVXGKJFAVKLTHOCXCIVK
NTIONSLFLTWEJAPANESEGOVERNMENTHASSTRIVENFORTHEREST

OLXTJTUNCLQCICRUIIWQDDMOTPRVTJKKSKFHXFKMDIKIZWROGZ
ORATIONOFPEACEANDIMHASCONSISTENTLYEXERTEDITSBESTEF

JYMTMNOVMFJ-OKTEIVMYANOHNNYPDLEXCFRRNEBLMNYEBGNHCZ
FORTSTOPREV-NTTHEEXTENTIONOFWARVVFLIKEVISTURBANCES

ZCFNWGGRHRIUUTTILKLODUYZKQOZMMNHASXHLPVTNGHQDAJIUG
CFCNSIASALSOTOTHATENDTNATINSEPTEMBERLASTYEARJAPANC

OOSZ-----ZRTGWFBLKI--------YBDABJ-----WYOEANV---OM
ONCL-----HETRIPAITI--------THGERM-----DYTALYC---OV
"""

LINES = PART1.split()
CIPHER_LINES = LINES[0::2]
PLAIN_LINES = LINES[1::2]
CIPHERTEXT = "".join(CIPHER_LINES)
PLAINTEXT = "".join(PLAIN_LINES)


def mismatches(want, got):
    return [(n, a, b) for n, (a, b) in enumerate(zip(want, got)) if a != b]


# ── construction ─────────────────────────────────────────────────

def test_defaults():
    m = Purple()
    assert m.positions() == (0, 0, 0, 0)
    assert m.key == "1-1,1,1-12"
    assert m.alphabet == ALPHABET


@pytest.mark.parametrize("kwargs", [
    dict(fast=0, middle=3),
    dict(fast=4, middle=3),
    dict(fast=-1, middle=3),
    dict(fast=1, middle=0),
    dict(fast=1, middle=4),
    dict(fast=2, middle=2),
    dict(fast=3, middle=3),
    dict(sixes=0),
    dict(sixes=26),
    dict(twenties=(1, 0, 3)),
    dict(twenties=(1, 2, 26)),
    dict(twenties=(1, 2)),
])
def test_bad_settings(kwargs):
    with pytest.raises(ConfigError):
        Purple(**kwargs)


@pytest.mark.parametrize("alphabet", [
    "AB",
    "AABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "AABCDEFGHIJKLMNOPQRSTUVWXY",
    "ABCDEFGHIJKLMNOPQRS1234567",
])
def test_bad_alphabet(alphabet):
    with pytest.raises(AlphabetError):
        Purple(alphabet=alphabet)


def test_roles():
    m = Purple(fast=2, middle=3)
    assert m.fast is m.twenties[1]
    assert m.middle is m.twenties[2]
    assert m.slow is m.twenties[0]


@pytest.mark.parametrize("key", [
    "9-1,2,3-23",
    "1-1,1,1-13",
    "25-25,25,25-31",
    "5-20,7,18-21",
])
def test_from_key(key):
    m = Purple.from_key(key, ALPHABET)
    assert m.key == key


def test_from_key_slots_are_switch_identity():
    m = Purple.from_key("5-20,7,18-21", ALPHABET)
    assert [sw.position for sw in m.twenties] == [19, 6, 17]
    assert m.positions() == (4, 6, 19, 17)


@pytest.mark.parametrize("key", [
    "0-1,2,3-13",
    "26-1,2,3-13",
    "1-1,0,3-13",
    "1-1,2,26-13",
    "1-1,2,3-03",
    "1-1,2,3-00",
    "1-1,2,3-14",
])
def test_from_key_out_of_range(key):
    with pytest.raises(ConfigError):
        Purple.from_key(key, ALPHABET)


@pytest.mark.parametrize("key", [
    "bad string",
    "1-2-1,2,26-14",
    "a-9,2,20-13",
    "1-a,2,20-13",
    "1-9,a,20-13",
    "1-9,2,a-13",
    "1-9,2,20-a3",
    "1-9,2,20-1a",
    "1-9,2,20-123",
    "1-9,2,20-123-4",
    "1-9,2,20,5-123",
])
def test_from_key_malformed(key):
    with pytest.raises(KeyFormatError):
        Purple.from_key(key, ALPHABET)


# ── stepping ─────────────────────────────────────────────────────

def test_switch_motion():
    m = Purple(21, (1, 25, 5), 1, 2, ALPHABET)
    expected = [
        (20, 0, 24, 4),
        (21, 1, 24, 4),
        (22, 2, 24, 4),
        (23, 3, 24, 4),
        (24, 3, 24, 5),
        (0, 3, 0, 5),
        (1, 4, 0, 5),
        (2, 5, 0, 5),
    ]
    for i, want in enumerate(expected):
        assert m.positions() == want, f"after {i} steps"
        m.step()


def test_fast_carries_into_middle():
    m = Purple(25, (1, 1, 1), 1, 2)
    m.step()
    assert m.positions() == (0, 0, 1, 0)


def test_reset():
    m = Purple.from_key(KEY, DAILY)
    start = m.positions()
    m.encipher_message("THE QUICK BROWN FOX")
    assert m.positions() != start
    m.reset()
    assert m.positions() == start


def test_machines_do_not_share_positions():
    a = Purple.from_key(KEY, DAILY)
    b = Purple.from_key(KEY, DAILY)
    a.step()
    assert a.sixes.wiring is b.sixes.wiring
    assert a.positions() != b.positions()
    assert b.positions() == Purple.from_key(KEY, DAILY).positions()


# ── letters and messages ─────────────────────────────────────────

def test_letter_transform_does_not_step():
    m = Purple.from_key(KEY, DAILY)
    start = m.positions()
    c = m.encipher_letter("A")
    assert m.decipher_letter(c) == "A"
    assert m.positions() == start


def test_every_letter_round_trips_at_fixed_position():
    m = Purple.from_key("3-7,12,19-31", DAILY)
    for ch in ALPHABET:
        assert m.decipher_letter(m.encipher_letter(ch)) == ch
        assert m.encipher_letter(m.decipher_letter(ch)) == ch


def test_decrypt_part_1_message():
    m = Purple.from_key(KEY, DAILY)
    actual = m.decipher_message(CIPHERTEXT)
    assert len(actual) == len(PLAINTEXT)
    assert mismatches(PLAINTEXT, actual) == []


def test_encrypt_part_1_message():
    m = Purple.from_key(KEY, DAILY)
    actual = m.encipher_message(PLAINTEXT.replace("-", "X"))
    bad = [(n, a, b) for n, a, b in mismatches(CIPHERTEXT, actual) if a != "-"]
    assert bad == []


def test_decrypt_keeps_line_layout():
    m = Purple.from_key(KEY, DAILY)
    actual = m.decipher_message("\n".join(CIPHER_LINES))
    assert actual == "\n".join(PLAIN_LINES)


def test_case_is_preserved():
    a = Purple.from_key(KEY, DAILY)
    b = Purple.from_key(KEY, DAILY)
    assert a.encipher_message("Attack at Dawn").lower() == b.encipher_message("ATTACK AT DAWN").lower()
    a.reset()
    out = a.encipher_message("aBc")
    assert out[0].islower() and out[1].isupper() and out[2].islower()


def test_whitespace_does_not_step():
    a = Purple.from_key(KEY, DAILY)
    b = Purple.from_key(KEY, DAILY)
    ref = b.encipher_message("ABCDEFGH")
    assert a.encipher_message("AB CD\tEF\nGH").split() == [
        ref[i:j] for i, j in ((0, 2), (2, 4), (4, 6), (6, 8))
    ]


def test_punctuation_passes_through_and_steps():
    a = Purple.from_key(KEY, DAILY)
    b = Purple.from_key(KEY, DAILY)
    out = a.encipher_message("AB.-CD")
    ref = b.encipher_message("ABXXCD")
    assert out[2:4] == ".-"
    assert out[:2] + out[4:] == ref[:2] + ref[4:]


@pytest.mark.parametrize("text", [
    "",
    "HELLO",
    "The quick brown fox, jumps over the lazy dog!",
    "STOP-GARBLE-HERE 1941\nNEXT LINE",
])
def test_message_round_trip(text):
    sender = Purple.from_key("17-4,11,22-32", DAILY)
    receiver = Purple.from_key("17-4,11,22-32", DAILY)
    assert receiver.decipher_message(sender.encipher_message(text)) == text
