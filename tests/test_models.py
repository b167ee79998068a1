import dataclasses

import pytest

from rustdrill.drills.models import (
    ChangeColor,
    Cons,
    Echo,
    Move,
    Nil,
    Package,
    Point,
    Quit,
    Rectangle,
    ReportCard,
    RobotState,
    Wrapper,
    create_empty_list,
    create_non_empty_list,
    create_order_template,
)


def test_generate_numeric_report_card():
    card = ReportCard(grade=2.1, student_name="Tom Wriggle", student_age=12)
    assert card.print() == "Tom Wriggle (12) - achieved a grade of 2.1"


def test_generate_alphabetic_report_card():
    card = ReportCard(grade="A+", student_name="Gary Plotter", student_age=11)
    assert card.print() == "Gary Plotter (11) - achieved a grade of A+"


def test_whole_float_grade_has_no_fraction():
    card = ReportCard(grade=3.0, student_name="Ann", student_age=10)
    assert card.print() == "Ann (10) - achieved a grade of 3"


def test_report_card_rejects_bad_age():
    with pytest.raises(ValueError):
        ReportCard(grade="B", student_name="Ann", student_age=300)


def test_your_order():
    template = create_order_template()
    order = dataclasses.replace(template, name="Hacker in Rust", count=1)
    assert order.name == "Hacker in Rust"
    assert order.year == template.year
    assert order.made_by_phone == template.made_by_phone
    assert order.made_by_mobile == template.made_by_mobile
    assert order.made_by_email == template.made_by_email
    assert order.item_number == template.item_number
    assert order.count == 1


def test_order_template_values():
    template = create_order_template()
    assert (template.name, template.year, template.item_number, template.count) == (
        "Bob",
        2019,
        123,
        0,
    )
    assert template.made_by_email is True


def test_fail_creating_weightless_package():
    with pytest.raises(ValueError):
        Package("Spain", "Austria", 5)


def test_create_international_package():
    assert Package("Spain", "Russia", 1200).is_international() is True


def test_create_local_package():
    assert Package("Canada", "Canada", 1200).is_international() is False


def test_calculate_transport_fees():
    package = Package("Spain", "Spain", 1500)
    assert package.get_fees(3) == 4500
    assert package.get_fees(6) == 9000


def test_match_message_call():
    state = RobotState(message="hello world")
    state.process(ChangeColor(255, 0, 255))
    state.process(Echo("Hello world!"))
    state.process(Move(Point(10, 15)))
    state.process(Quit())
    assert state.color == (255, 0, 255)
    assert state.position.x == 10
    assert state.position.y == 15
    assert state.quit is True
    assert state.message == "Hello world!"


def test_process_rejects_unknown_message():
    with pytest.raises(TypeError):
        RobotState().process("jump")


def test_store_u32_in_wrapper():
    assert Wrapper(42).value == 42


def test_store_str_in_wrapper():
    assert Wrapper("Foo").value == "Foo"


def test_correct_width_and_height():
    rect = Rectangle(10, 20)
    assert rect.width == 10
    assert rect.height == 20


def test_negative_width():
    with pytest.raises(ValueError):
        Rectangle(-10, 10)


def test_negative_height():
    with pytest.raises(ValueError):
        Rectangle(10, -10)


def test_create_empty_list():
    assert create_empty_list() == Nil()


def test_create_non_empty_list():
    assert create_non_empty_list() != create_empty_list()
    assert create_non_empty_list() == Cons(1, Nil())