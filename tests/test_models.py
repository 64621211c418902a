from app.models import Assignment, Company, User


def test_user_from_row_flattens_nested_companies():
    row = {
        'id': 'a1b2',
        'username': 'jane',
        'password': 'secret',
        'email': 'jane@example.com',
        'full_name': 'Jane Doe',
        'user_companies': [
            {'company_id': 1, 'companies': {'id': 1, 'name': 'Torkin Manes LLP'}},
            {'company_id': 7, 'companies': None},
            {'company_id': 2, 'companies': {'id': 2, 'name': 'Medicentres Canada Inc',
                                            'working_hours': '8 to 4'}},
        ],
    }

    user = User.from_row(row)

    assert user.id == 'a1b2'
    assert [c.name for c in user.companies] == ['Torkin Manes LLP', 'Medicentres Canada Inc']
    assert user.companies[1].working_hours == '8 to 4'


def test_user_from_plain_row_has_no_companies():
    user = User.from_row({'id': 5, 'username': 'bob', 'full_name': None})

    assert user.id == '5'
    assert user.companies == []
    assert user.display_name == 'bob'
    assert user.get_id() == '5'


def test_company_row_round_trip_drops_id():
    company = Company.from_row({'id': 3, 'name': 'Brandt Group of Companies', 'image': None})

    assert company.image == ''
    assert 'id' not in company.to_row()


def test_assignment_row():
    assert Assignment(user_id='u1', company_id=2).to_row() == {'user_id': 'u1', 'company_id': 2}
