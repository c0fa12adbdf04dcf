from rest_framework import status
from rest_framework.decorators import action
from drf_spectacular.utils import extend_schema

from apps.common.responses import envelope
from apps.teams.views import CurrentTeamViewSet, UUID_PATTERN
from .serializers import (
    BankAccountSerializer,
    BankAccountCreateSerializer,
    BankAccountUpdateSerializer,
    ExpenseSerializer,
    ExpenseCreateSerializer,
    ExpenseUpdateSerializer,
    PaymentSerializer,
    PaymentCreateSerializer,
    PaymentUpdateSerializer,
)
from apps.funds.services import (
    add_bank_account,
    list_bank_accounts,
    get_bank_account,
    update_bank_account,
    delete_bank_account,
    add_expense,
    list_expenses,
    list_expenses_by_user,
    get_expense,
    update_expense,
    delete_expense,
    add_payment,
    list_payments,
    list_payments_by_user,
    get_payment,
    update_payment,
    delete_payment,
)


@extend_schema(tags=['bank-accounts'])
class BankAccountViewSet(CurrentTeamViewSet):
    """
    Bank accounts of the current team.

    Reads need an active membership; writes need fund manager.
    """

    @extend_schema(responses={200: BankAccountSerializer(many=True)})
    def list(self, request):
        accounts = list_bank_accounts(team=self.get_team(), user=request.user)
        return envelope(
            'Bank accounts retrieved successfully',
            BankAccountSerializer(accounts, many=True).data,
        )

    @extend_schema(request=BankAccountCreateSerializer, responses={201: BankAccountSerializer})
    def create(self, request):
        serializer = BankAccountCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        account = add_bank_account(
            team=self.get_team(),
            user=request.user,
            account_user_id=data.pop('user_id'),
            **data
        )
        return envelope(
            'Bank account added successfully',
            BankAccountSerializer(account).data,
            status_code=status.HTTP_201_CREATED,
        )

    @extend_schema(responses={200: BankAccountSerializer})
    def retrieve(self, request, pk=None):
        account = get_bank_account(team=self.get_team(), user=request.user, account_id=pk)
        return envelope('Bank account retrieved successfully', BankAccountSerializer(account).data)

    @extend_schema(request=BankAccountUpdateSerializer, responses={200: BankAccountSerializer})
    def update(self, request, pk=None):
        serializer = BankAccountUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        account = update_bank_account(
            team=self.get_team(),
            user=request.user,
            account_id=pk,
            **serializer.validated_data
        )
        return envelope('Bank account updated successfully', BankAccountSerializer(account).data)

    partial_update = update

    def destroy(self, request, pk=None):
        delete_bank_account(team=self.get_team(), user=request.user, account_id=pk)
        return envelope('Bank account deleted successfully')


@extend_schema(tags=['expenses'])
class ExpenseViewSet(CurrentTeamViewSet):
    """
    Expenses of the current team.

    Members manage their own expenses; fund managers manage everyone's.
    """

    @extend_schema(responses={200: ExpenseSerializer(many=True)})
    def list(self, request):
        expenses = list_expenses(team=self.get_team(), user=request.user)
        return envelope('Expenses retrieved successfully', ExpenseSerializer(expenses, many=True).data)

    @extend_schema(request=ExpenseCreateSerializer, responses={201: ExpenseSerializer})
    def create(self, request):
        serializer = ExpenseCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        expense = add_expense(
            team=self.get_team(),
            user=request.user,
            amount=data['amount'],
            reason=data['reason'],
            date=data.get('date'),
            note=data.get('note', ''),
            spender_id=data.get('user_id'),
        )
        return envelope(
            'Expense added successfully',
            ExpenseSerializer(expense).data,
            status_code=status.HTTP_201_CREATED,
        )

    @extend_schema(responses={200: ExpenseSerializer})
    def retrieve(self, request, pk=None):
        expense = get_expense(team=self.get_team(), user=request.user, expense_id=pk)
        return envelope('Expense retrieved successfully', ExpenseSerializer(expense).data)

    @extend_schema(request=ExpenseUpdateSerializer, responses={200: ExpenseSerializer})
    def update(self, request, pk=None):
        serializer = ExpenseUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        expense = update_expense(
            team=self.get_team(),
            user=request.user,
            expense_id=pk,
            **serializer.validated_data
        )
        return envelope('Expense updated successfully', ExpenseSerializer(expense).data)

    partial_update = update

    def destroy(self, request, pk=None):
        delete_expense(team=self.get_team(), user=request.user, expense_id=pk)
        return envelope('Expense deleted successfully')

    @extend_schema(responses={200: ExpenseSerializer(many=True)})
    @action(detail=False, methods=['get'], url_path=rf'user/(?P<user_id>{UUID_PATTERN})', url_name='by-user')
    def by_user(self, request, user_id=None):
        """Expenses of one member in the current team."""
        expenses = list_expenses_by_user(team=self.get_team(), user=request.user, spender_id=user_id)
        return envelope('Expenses retrieved successfully', ExpenseSerializer(expenses, many=True).data)


@extend_schema(tags=['payments'])
class PaymentViewSet(CurrentTeamViewSet):
    """
    Payments into the current team's fund.

    Members manage their own payments; fund managers manage everyone's.
    """

    @extend_schema(responses={200: PaymentSerializer(many=True)})
    def list(self, request):
        payments = list_payments(team=self.get_team(), user=request.user)
        return envelope('Payments retrieved successfully', PaymentSerializer(payments, many=True).data)

    @extend_schema(request=PaymentCreateSerializer, responses={201: PaymentSerializer})
    def create(self, request):
        serializer = PaymentCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        payment = add_payment(
            team=self.get_team(),
            user=request.user,
            amount=data['amount'],
            date=data.get('date'),
            note=data.get('note', ''),
            paid_by_id=data.get('paid_by'),
        )
        return envelope(
            'Payment added successfully',
            PaymentSerializer(payment).data,
            status_code=status.HTTP_201_CREATED,
        )

    @extend_schema(responses={200: PaymentSerializer})
    def retrieve(self, request, pk=None):
        payment = get_payment(team=self.get_team(), user=request.user, payment_id=pk)
        return envelope('Payment retrieved successfully', PaymentSerializer(payment).data)

    @extend_schema(request=PaymentUpdateSerializer, responses={200: PaymentSerializer})
    def update(self, request, pk=None):
        serializer = PaymentUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        payment = update_payment(
            team=self.get_team(),
            user=request.user,
            payment_id=pk,
            **serializer.validated_data
        )
        return envelope('Payment updated successfully', PaymentSerializer(payment).data)

    partial_update = update

    def destroy(self, request, pk=None):
        delete_payment(team=self.get_team(), user=request.user, payment_id=pk)
        return envelope('Payment deleted successfully')

    @extend_schema(responses={200: PaymentSerializer(many=True)})
    @action(detail=False, methods=['get'], url_path=rf'user/(?P<user_id>{UUID_PATTERN})', url_name='by-user')
    def by_user(self, request, user_id=None):
        """Payments of one member in the current team."""
        payments = list_payments_by_user(team=self.get_team(), user=request.user, paid_by_id=user_id)
        return envelope('Payments retrieved successfully', PaymentSerializer(payments, many=True).data)
