import io

from patternkit.chain import (
    BoardingPassProcessor,
    CompleteBoardingProcessor,
    IdentityCheckProcessor,
    LuggageCheckInProcessor,
    Passenger,
    SecurityCheckProcessor,
    build_boarding_processor_chain,
)


def test_full_chain_boards_passenger(capsys):
    chain = build_boarding_processor_chain()
    passenger = Passenger("李四", has_luggage=True)
    messages = chain.process_for(passenger)
    expected = [
        "为旅客李四办理登机牌;",
        "为旅客李四办理行李托运;",
        "为旅客李四核实身份信息;",
        "为旅客李四进行安检;",
        "旅客李四成功登机;",
    ]
    assert messages == expected
    assert capsys.readouterr().out == "".join(line + "\n" for line in expected)
    assert passenger.is_complete_for_boarding
    assert passenger.has_boarding_pass
    assert passenger.is_pass_identity_check
    assert passenger.is_pass_security_check


def test_chain_without_luggage_skips_check_in():
    chain = build_boarding_processor_chain()
    messages = chain.process_for(Passenger("王五"))
    assert "为旅客王五办理行李托运;" not in messages
    assert messages[-1] == "旅客王五成功登机;"
    assert len(messages) == 4


def test_luggage_without_pass_stops():
    out = io.StringIO()
    luggage = LuggageCheckInProcessor(out)
    nxt = CompleteBoardingProcessor(out)
    luggage.set_next_processor(nxt)
    passenger = Passenger("张三", has_luggage=True)
    assert luggage.process_for(passenger) == ["旅客张三未办理登机牌，不能托运行李;"]
    assert out.getvalue() == "旅客张三未办理登机牌，不能托运行李;\n"
    assert not passenger.is_complete_for_boarding


def test_identity_and_security_without_pass():
    passenger = Passenger("张三")
    out = io.StringIO()
    assert IdentityCheckProcessor(out).process_for(passenger) == [
        "旅客张三未办理登机牌，不能办理身份校验;"
    ]
    assert SecurityCheckProcessor(out).process_for(passenger) == [
        "旅客张三未办理登机牌，不能进行安检;"
    ]


def test_complete_requires_all_checks():
    passenger = Passenger("张三", has_boarding_pass=True, is_pass_identity_check=True)
    messages = CompleteBoardingProcessor(io.StringIO()).process_for(passenger)
    assert messages == ["旅客张三登机检查过程未完成，不能登机;"]
    assert not passenger.is_complete_for_boarding


def test_already_done_steps_are_silent():
    passenger = Passenger(
        "赵六",
        has_boarding_pass=True,
        is_pass_identity_check=True,
        is_pass_security_check=True,
    )
    messages = build_boarding_processor_chain().process_for(passenger)
    assert messages == ["旅客赵六成功登机;"]


def test_processor_without_next_returns_own_messages():
    processor = BoardingPassProcessor(io.StringIO())
    passenger = Passenger("孙七")
    assert processor.process_for(passenger) == ["为旅客孙七办理登机牌;"]
    assert passenger.has_boarding_pass