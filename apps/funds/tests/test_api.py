import pytest
from decimal import Decimal
from uuid import uuid4
from django.urls import reverse
from rest_framework import status
from apps.funds.models import BankAccount, Expense, Payment


# =============================================================================
# Bank Account Tests
# =============================================================================

@pytest.mark.django_db
class TestBankAccountAPI:
    """Tests for /api/bank-accounts/"""

    def test_list_requires_auth(self, api_client):
        url = reverse('funds:bank-account-list')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['success'] is False
        assert response.data['statusCode'] == 401

    def test_create_bank_account(self, manager_client, fund_team, other_member):
        url = reverse('funds:bank-account-list')
        data = {
            'user_id': str(other_member.id),
            'bank_name': 'River Bank',
            'branch': 'Main Street',
            'account_no': '5550001112',
            'account_title': 'Other Member',
            'routing_number': '111000025',
        }
        response = manager_client.post(url, data)

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['success'] is True
        assert response.data['message'] == 'Bank account added successfully'
        assert response.data['data']['user']['email'] == other_member.email
        assert 'password' not in response.data['data']['user']

    def test_create_duplicate_bank_account(self, manager_client, bank_account, spender):
        url = reverse('funds:bank-account-list')
        data = {
            'user_id': str(spender.id),
            'bank_name': 'River Bank',
            'branch': 'Main Street',
            'account_no': '5550001112',
            'account_title': 'Snack Spender',
            'routing_number': '111000025',
        }
        response = manager_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['message'] == 'User already has a bank account registered for this team'

    def test_create_bank_account_as_member(self, spender_client, fund_team, spender):
        url = reverse('funds:bank-account-list')
        data = {
            'user_id': str(spender.id),
            'bank_name': 'River Bank',
            'branch': 'Main Street',
            'account_no': '5550001112',
            'account_title': 'Snack Spender',
            'routing_number': '111000025',
        }
        response = spender_client.post(url, data)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data['message'] == 'Only fund managers can add bank accounts'

    def test_create_bank_account_missing_field(self, manager_client, fund_team, other_member):
        url = reverse('funds:bank-account-list')
        response = manager_client.post(url, {'user_id': str(other_member.id)})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['success'] is False

    def test_list_bank_accounts(self, spender_client, bank_account):
        url = reverse('funds:bank-account-list')
        response = spender_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data['data']) == 1
        assert response.data['data'][0]['bank_name'] == 'City Bank'

    def test_update_bank_account(self, manager_client, bank_account):
        url = reverse('funds:bank-account-detail', kwargs={'pk': bank_account.id})
        response = manager_client.patch(url, {'routing_number': '999999999'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['data']['routing_number'] == '999999999'
        assert response.data['data']['account_no'] == '0012345678'

    def test_delete_bank_account(self, manager_client, bank_account):
        url = reverse('funds:bank-account-detail', kwargs={'pk': bank_account.id})
        response = manager_client.delete(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['message'] == 'Bank account deleted successfully'
        assert 'data' not in response.data
        assert not BankAccount.objects.filter(id=bank_account.id).exists()

    def test_retrieve_from_other_team(self, outsider_client, other_team, bank_account):
        url = reverse('funds:bank-account-detail', kwargs={'pk': bank_account.id})
        response = outsider_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_without_current_team(self, outsider_client, outsider):
        """A user who never joined a team has nothing to list."""
        url = reverse('funds:bank-account-list')
        response = outsider_client.get(url)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['success'] is False


# =============================================================================
# Expense Tests
# =============================================================================

@pytest.mark.django_db
class TestExpenseAPI:
    """Tests for /api/expenses/"""

    def test_create_own_expense(self, spender_client, fund_team, spender):
        url = reverse('funds:expense-list')
        data = {'amount': '4.50', 'reason': 'Chips', 'date': '2024-03-10'}
        response = spender_client.post(url, data)

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['data']['amount'] == '4.50'
        assert response.data['data']['date'] == '2024-03-10'
        assert response.data['data']['user']['id'] == str(spender.id)

    def test_create_expense_negative_amount(self, spender_client, fund_team):
        url = reverse('funds:expense-list')
        response = spender_client.post(url, {'amount': '-4.50', 'reason': 'Chips'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['message'] == 'Amount must be non-negative'

    def test_create_expense_for_other_member(self, spender_client, fund_team, other_member):
        url = reverse('funds:expense-list')
        data = {'user_id': str(other_member.id), 'amount': '4.50', 'reason': 'Chips'}
        response = spender_client.post(url, data)

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_list_expenses(self, other_member_client, expense):
        url = reverse('funds:expense-list')
        response = other_member_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['message'] == 'Expenses retrieved successfully'
        assert [item['id'] for item in response.data['data']] == [str(expense.id)]

    def test_list_expenses_by_user(self, manager_client, spender, expense):
        url = reverse('funds:expense-by-user', kwargs={'user_id': spender.id})
        response = manager_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data['data']) == 1

    def test_list_expenses_by_unknown_user(self, manager_client, fund_team):
        url = reverse('funds:expense-by-user', kwargs={'user_id': uuid4()})
        response = manager_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['message'] == 'User not found'

    def test_update_foreign_expense(self, other_member_client, expense):
        url = reverse('funds:expense-detail', kwargs={'pk': expense.id})
        response = other_member_client.patch(url, {'amount': '1.00'})

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data['message'] == 'You can only modify your own expenses'

    def test_update_own_expense(self, spender_client, expense):
        url = reverse('funds:expense-detail', kwargs={'pk': expense.id})
        response = spender_client.put(url, {'reason': 'Cookies'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['data']['reason'] == 'Cookies'
        assert response.data['data']['amount'] == '12.50'

    def test_delete_expense_by_fund_manager(self, manager_client, expense):
        url = reverse('funds:expense-detail', kwargs={'pk': expense.id})
        response = manager_client.delete(url)

        assert response.status_code == status.HTTP_200_OK
        assert not Expense.objects.filter(id=expense.id).exists()

    def test_retrieve_missing_expense(self, spender_client, fund_team):
        url = reverse('funds:expense-detail', kwargs={'pk': uuid4()})
        response = spender_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['success'] is False


# =============================================================================
# Payment Tests
# =============================================================================

@pytest.mark.django_db
class TestPaymentAPI:
    """Tests for /api/payments/"""

    def test_create_payment(self, other_member_client, fund_team, other_member):
        url = reverse('funds:payment-list')
        response = other_member_client.post(url, {'amount': '25.00', 'note': 'April'})

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['data']['paid_by']['id'] == str(other_member.id)
        assert Payment.objects.get().amount == Decimal('25.00')

    def test_create_zero_payment(self, other_member_client, fund_team):
        url = reverse('funds:payment-list')
        response = other_member_client.post(url, {'amount': '0.00'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['message'] == 'Amount must be greater than 0'

    def test_fund_manager_records_payment_for_member(self, manager_client, fund_team, spender):
        url = reverse('funds:payment-list')
        response = manager_client.post(url, {'amount': '8.00', 'paid_by': str(spender.id)})

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['data']['paid_by']['id'] == str(spender.id)

    def test_list_payments_by_user(self, spender_client, spender, payment):
        url = reverse('funds:payment-by-user', kwargs={'user_id': spender.id})
        response = spender_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['data'][0]['amount'] == '20.00'

    def test_delete_foreign_payment(self, other_member_client, payment):
        url = reverse('funds:payment-detail', kwargs={'pk': payment.id})
        response = other_member_client.delete(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert Payment.objects.filter(id=payment.id).exists()
