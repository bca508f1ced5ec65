from rest_framework import generics, status
from rest_framework.response import Response

from clinic_backend.core.utils import log_action, save_existing

from .models import Patient
from .permissions import PatientPermission
from .serializers import PatientReadSerializer, PatientWriteSerializer


class PatientListCreateView(generics.ListCreateAPIView):
    """List patients (optional ?search= on name, ?gender=) or create one."""

    permission_classes = [PatientPermission]

    def get_queryset(self):
        qs = Patient.objects.all()
        search = self.request.query_params.get('search')
        if search:
            qs = qs.filter(name__icontains=search)
        gender = self.request.query_params.get('gender')
        if gender:
            qs = qs.filter(gender__iexact=gender)
        return qs

    def get_serializer_class(self):
        if self.request.method == 'POST':
            return PatientWriteSerializer
        return PatientReadSerializer

    def create(self, request, *args, **kwargs):
        write_serializer = self.get_serializer(data=request.data)
        write_serializer.is_valid(raise_exception=True)
        patient = write_serializer.save()
        log_action(request.user, 'patient_create', 'Patient', patient.id)

        read_serializer = PatientReadSerializer(patient)
        headers = self.get_success_headers(read_serializer.data)
        return Response(read_serializer.data, status=status.HTTP_201_CREATED, headers=headers)


class PatientDetailView(generics.RetrieveUpdateDestroyAPIView):
    """Retrieve, update or delete a patient."""

    permission_classes = [PatientPermission]
    queryset = Patient.objects.all()

    def get_serializer_class(self):
        if self.request.method in ('PUT', 'PATCH'):
            return PatientWriteSerializer
        return PatientReadSerializer

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        patient = self.get_object()

        serializer = PatientWriteSerializer(patient, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        save_existing(serializer)

        log_action(request.user, 'patient_update', 'Patient', patient.id)
        return Response(status=status.HTTP_204_NO_CONTENT)

    def perform_destroy(self, instance):
        patient_id = instance.id
        instance.delete()
        log_action(self.request.user, 'patient_delete', 'Patient', patient_id)


class PatientByGenderView(generics.ListAPIView):
    """Patients whose gender matches exactly, ignoring case."""

    permission_classes = [PatientPermission]
    serializer_class = PatientReadSerializer

    def get_queryset(self):
        return Patient.objects.filter(gender__iexact=self.kwargs['gender'])


class PatientSearchView(generics.ListAPIView):
    """Patients whose name contains the search term, ignoring case."""

    permission_classes = [PatientPermission]
    serializer_class = PatientReadSerializer

    def get_queryset(self):
        return Patient.objects.filter(name__icontains=self.kwargs['name'])
