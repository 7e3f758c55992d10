from prompts import SEPARATOR, build_prompts, build_retry_prompts


def test_build_prompts_states_count_shape_separator_and_text():
    system, user = build_prompts("Photosynthesis converts light.", 7)
    assert "EXACTLY 7 flashcards" in system
    assert "Question: <question text>" in system
    assert "Answer: <answer text>" in system
    assert f'separated by "{SEPARATOR}"' in system
    assert "exactly 7 flashcards" in user
    assert user.endswith("Text: Photosynthesis converts light.")


def test_retry_prompts_are_stricter():
    system, user = build_retry_prompts("Some text", 3)
    assert "No more, no less" in system
    assert "on its own line" in system
    assert user.count("EXACTLY 3 flashcards") == 2
    assert f'separated by "{SEPARATOR}"' in user
    assert "Text: Some text" in user


def test_source_text_with_braces_is_passed_through():
    _, user = build_prompts("f(x) = {x | x > 0}", 1)
    assert "{x | x > 0}" in user
