"""
Meaningful Names - nine before/after naming demonstrations.

Each ``exampleN_*`` routine prints a section header, one ``Bad:`` line and
one ``Good:`` line. Routines take no arguments, keep no state, and print
byte-identical output on every call.

Run: python -m naming_study
"""

from __future__ import annotations

from naming_study.domain import Address, CustomerBad, CustomerGood, GSDAccountAddress

TITLES: dict[int, str] = {
    1: "의도를 분명히 하라",
    2: "그릇된 정보와 혼동을 피하라",
    3: "의미 있게 구분하고 일관된 어휘를 유지하라",
    4: "발음하기 쉽고 검색 가능한 이름을 써라",
    5: "인코딩과 불필요한 접두어를 피하라",
    6: "명사와 동사의 구분",
    7: "맥락을 부여하라",
    8: "불필요한 맥락 제거",
    9: "기발함보다 명료함을 택하라",
}

# 2025-01-01T00:00:00Z in milliseconds. Fixed so that example 4 is repeatable.
GENERATION_TIMESTAMP_MS = 1735689600000


def format_header(number: int) -> str:
    return f"===== {number}. {TITLES[number]} ====="


def _print_header(number: int) -> None:
    # Every section after the first is separated by a blank line.
    prefix = "" if number == 1 else "\n"
    print(prefix + format_header(number))


# =============================================================================
# 1. Intention-revealing names
# =============================================================================


def example1_intention_revealing() -> None:
    _print_header(1)
    # ❌ what is d?
    d = 5
    print(f"Bad: d = {d}")

    # ✅
    elapsed_time_in_days = 5
    print(f"Good: elapsedTimeInDays = {elapsed_time_in_days}")


# =============================================================================
# 2. Avoid disinformation
# =============================================================================


def example2_avoid_misleading_info() -> None:
    _print_header(2)
    # ❌ not a list
    account_list = "user123"
    print(f"Bad: accountList = {account_list}")

    # ✅
    account_id = "user123"
    print(f"Good: accountId = {account_id}")


# =============================================================================
# 3. Meaningful distinctions, one word per concept
# =============================================================================


def get_user_data() -> str:
    return "getUserData()"


def fetch_customer_data() -> str:
    return "fetchCustomerData()"


def retrieve_client_data() -> str:
    return "retrieveClientData()"


def fetch_user_data() -> str:
    return "fetchUserData()"


def fetch_customer_data_unified() -> str:
    return "fetchCustomerDataUnified()"


def example3_consistent_vocabulary() -> None:
    _print_header(3)
    # ❌ get / fetch / retrieve for the same concept
    data1 = get_user_data()
    data2 = fetch_customer_data()
    data3 = retrieve_client_data()
    print(f"Bad: {data1}, {data2}, {data3}")

    # ✅ always "fetch"
    user_data = fetch_user_data()
    customer_data = fetch_customer_data_unified()
    print(f"Good: {user_data}, {customer_data}")


# =============================================================================
# 4. Pronounceable, searchable names
# =============================================================================


def example4_pronounceable_and_searchable() -> None:
    _print_header(4)
    # ❌ "gen-why-em-dee-aitch-em-ess"
    genymdhms = GENERATION_TIMESTAMP_MS
    print(f"Bad: genymdhms = {genymdhms}")

    # ✅
    generation_timestamp = GENERATION_TIMESTAMP_MS
    print(f"Good: generationTimestamp = {generation_timestamp}")


# =============================================================================
# 5. No encodings
# =============================================================================


def example5_no_encoding_prefix() -> None:
    _print_header(5)
    # ❌ Hungarian notation: member + int prefixes
    m_n_user_count = 10
    print(f"Bad: m_nUserCount = {m_n_user_count}")

    # ✅
    user_count = 10
    print(f"Good: userCount = {user_count}")


# =============================================================================
# 6. Nouns for things, verbs for actions
# =============================================================================


def example6_noun_and_verb_naming() -> None:
    _print_header(6)
    # ❌ method named as a noun
    c1 = CustomerBad("홍길동")
    c1.customer()

    # ✅ method named as a verb
    c2 = CustomerGood("홍길동")
    c2.save()


# =============================================================================
# 7. Add meaningful context
# =============================================================================


def example7_add_context() -> None:
    _print_header(7)
    # ❌ state of what?
    state = "서울"
    print(f"Bad: state = {state}")

    # ✅ the Address type supplies the context
    address = Address("서울", "강남구", "12345")
    print(f"Good: Address.state = {address.get_state()}")


# =============================================================================
# 8. Don't add gratuitous context
# =============================================================================


def example8_remove_unnecessary_context() -> None:
    _print_header(8)
    # ❌ every type in the "GSD" app prefixed with GSD
    bad_address = GSDAccountAddress("부산", "해운대구", "54321")
    print(f"Bad: {bad_address.get_city()}")

    # ✅
    good_address = Address("부산", "해운대구", "54321")
    print(f"Good: {good_address.get_city()}")


# =============================================================================
# 9. Clarity over cleverness
# =============================================================================


def holy_hand_grenade() -> None:
    print("Bad: holyHandGrenade() → 유머러스하지만 의미 불명확")


def delete_items() -> None:
    print("Good: deleteItems() → 명확히 항목 삭제를 의미")


def example9_clarity_over_cleverness() -> None:
    _print_header(9)
    holy_hand_grenade()
    delete_items()


EXAMPLE_ROUTINES = (
    example1_intention_revealing,
    example2_avoid_misleading_info,
    example3_consistent_vocabulary,
    example4_pronounceable_and_searchable,
    example5_no_encoding_prefix,
    example6_noun_and_verb_naming,
    example7_add_context,
    example8_remove_unnecessary_context,
    example9_clarity_over_cleverness,
)


def run_all() -> None:
    """Run the nine demonstrations in order."""
    for routine in EXAMPLE_ROUTINES:
        routine()


main = run_all
